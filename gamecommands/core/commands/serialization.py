# file: gamecommands/core/commands/serialization.py
"""
Binary round-tripping of command sequences.

Commands are pickled inside a small envelope (magic + format version) so that
foreign or future payloads are rejected before any unpickling happens.
Pickle resolves functions, methods and classes by qualified name, so module
level functions, bound methods of picklable objects, functools.partial and
operator.methodcaller all survive a round-trip; lambdas and nested functions
do not and are reported as SerializationError.

Deserializing is unpickling: only load bytes from a trusted source.
"""

import logging
import pickle
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Protocol

from gamecommands.core.commands.base_command import BaseCommand
from gamecommands.core.exceptions import DeserializationError, SerializationError

logger = logging.getLogger(__name__)

MAGIC = b"GCMD"
FORMAT_VERSION = 1
HEADER_SIZE = len(MAGIC) + 1

SERIALIZATION_CONFIG = "serialization_config.json"


class ConfigLoader(Protocol):
    def get(self, config_name: str, key: str, default=None): ...
    def get_data_dir(self) -> Path: ...


def serialize(commands: Iterable[BaseCommand], protocol: Optional[int] = None) -> bytes:
    """
    Serializes an ordered sequence of commands to bytes.

    Args:
        commands: The commands to serialize. Order is preserved.
        protocol: Pickle protocol; None selects the interpreter default.

    Raises:
        SerializationError: If an element is not a command or its bound
            target/operation cannot be pickled.
    """
    commands = list(commands)
    for index, command in enumerate(commands):
        if not isinstance(command, BaseCommand):
            raise SerializationError(
                f"Item {index} is not a command: {type(command).__name__}"
            )

    try:
        payload = pickle.dumps(commands, protocol=protocol)
    except (pickle.PicklingError, AttributeError, TypeError, ValueError, RecursionError) as e:
        logger.error(f"Failed to serialize {len(commands)} commands: {e}")
        raise SerializationError(f"Commands contain non-portable data: {e}") from e

    logger.debug(f"Serialized {len(commands)} commands into {HEADER_SIZE + len(payload)} bytes")
    return MAGIC + bytes([FORMAT_VERSION]) + payload


def deserialize(data: bytes) -> List[BaseCommand]:
    """
    Reconstructs a list of commands from bytes produced by serialize().

    Raises:
        DeserializationError: If the input is too short, carries the wrong
            magic or an unsupported version, is truncated or corrupt,
            references names that do not exist in this interpreter, or does
            not contain a list of commands.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DeserializationError(f"Expected bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise DeserializationError(f"Input too short: {len(data)} bytes")
    if data[:len(MAGIC)] != MAGIC:
        raise DeserializationError("Input is not a serialized command sequence")

    version = data[len(MAGIC)]
    if version != FORMAT_VERSION:
        raise DeserializationError(
            f"Unsupported format version {version} (expected {FORMAT_VERSION})"
        )

    try:
        commands = pickle.loads(data[HEADER_SIZE:])
    except (pickle.UnpicklingError, EOFError, AttributeError, ImportError,
            IndexError, KeyError, TypeError, ValueError, OverflowError,
            MemoryError, RecursionError) as e:
        logger.error(f"Failed to deserialize commands: {e}")
        raise DeserializationError(f"Corrupt or unresolvable command data: {e}") from e

    if not isinstance(commands, list):
        raise DeserializationError(f"Expected a list of commands, got {type(commands).__name__}")
    for index, command in enumerate(commands):
        if not isinstance(command, BaseCommand):
            raise DeserializationError(
                f"Item {index} is not a command: {type(command).__name__}"
            )

    logger.debug(f"Deserialized {len(commands)} commands")
    return commands


def dump(commands: Iterable[BaseCommand], fp: BinaryIO, protocol: Optional[int] = None):
    """Serializes commands and writes them to a binary file object."""
    fp.write(serialize(commands, protocol=protocol))


def load(fp: BinaryIO) -> List[BaseCommand]:
    """Reads a binary file object to its end and deserializes the commands."""
    return deserialize(fp.read())


class CommandSerializer:
    """
    serialize()/deserialize() bound to the project's serialization config.
    """
    def __init__(self, config_loader: ConfigLoader):
        self.config_loader = config_loader
        self.protocol: Optional[int] = config_loader.get(SERIALIZATION_CONFIG, "pickle_protocol", None)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"CommandSerializer initialized with pickle protocol {'default' if self.protocol is None else self.protocol}")

    def serialize(self, commands: Iterable[BaseCommand]) -> bytes:
        return serialize(commands, protocol=self.protocol)

    def deserialize(self, data: bytes) -> List[BaseCommand]:
        return deserialize(data)

    def default_path(self) -> Path:
        """Returns the configured commands file inside the data directory."""
        filename = self.config_loader.get(SERIALIZATION_CONFIG, "commands_file", "commands.bin")
        return Path(self.config_loader.get_data_dir()) / filename

    def save(self, commands: Iterable[BaseCommand], path: Optional[Path] = None) -> Path:
        """
        Writes commands to a file. The file is only written once serialization
        has fully succeeded.
        """
        path = Path(path) if path is not None else self.default_path()
        data = self.serialize(commands)
        try:
            path.write_bytes(data)
        except (IOError, OSError) as e:
            self.logger.error(f"Failed to write commands to {path}: {e}")
            raise SerializationError(f"Could not write to file {path}: {e}") from e
        self.logger.info(f"Saved {len(data)} bytes of commands to {path}")
        return path

    def load_file(self, path: Optional[Path] = None) -> List[BaseCommand]:
        """Reads and deserializes commands previously written by save()."""
        path = Path(path) if path is not None else self.default_path()
        try:
            with open(path, "rb") as f:
                commands = load(f)
        except (IOError, OSError) as e:
            self.logger.error(f"Failed to read commands from {path}: {e}")
            raise DeserializationError(f"Could not read file {path}: {e}") from e
        self.logger.info(f"Loaded {len(commands)} commands from {path}")
        return commands
