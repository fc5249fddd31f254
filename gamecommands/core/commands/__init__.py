from gamecommands.core.commands.base_command import (
    BaseCommand,
    Command,
    Reversible,
    ReversibleCommand,
    as_reversible,
    is_reversible,
)
from gamecommands.core.commands.serialization import (
    CommandSerializer,
    deserialize,
    dump,
    load,
    serialize,
)

__all__ = [
    "BaseCommand",
    "Command",
    "Reversible",
    "ReversibleCommand",
    "as_reversible",
    "is_reversible",
    "CommandSerializer",
    "serialize",
    "deserialize",
    "dump",
    "load",
]
