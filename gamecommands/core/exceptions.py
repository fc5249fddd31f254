# file: gamecommands/core/exceptions.py
"""
Defines the custom exception hierarchy for gamecommands.

Failures raised by a command's own operation are deliberately absent here:
they reach the caller of execute()/undo() unchanged.
"""

class GameCommandsError(Exception):
    """Base exception for all library-specific errors."""
    pass

# --- Configuration Errors ---
class ConfigurationError(GameCommandsError):
    """Error related to loading, parsing, or validating configuration."""
    pass

# --- Serialization Errors ---
class CommandSerializationError(GameCommandsError):
    """Base error for converting commands to and from bytes."""
    pass

class SerializationError(CommandSerializationError):
    """A command's bound target or operation has no portable representation."""
    pass

class DeserializationError(CommandSerializationError):
    """Input is malformed, truncated, of an unsupported version, or unresolvable."""
    pass
