"""
Command pattern utilities for game code: bind a target to an operation,
execute it, optionally undo it, and round-trip command lists through bytes.
"""

__version__ = "0.1.0"
