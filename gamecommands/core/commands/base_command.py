# file: gamecommands/core/commands/base_command.py

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[T], Any]


class BaseCommand(ABC):
    """
    Abstract base class for a command in the Command Pattern.
    """
    @abstractmethod
    def execute(self) -> None:
        """
        Execute the command.
        """
        pass


class Reversible(ABC):
    """
    Capability interface for commands whose effect can be reversed.
    """
    @abstractmethod
    def undo(self) -> None:
        """
        Reverse the effects of the execute method.
        """
        pass


def _describe(operation: Any) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


class Command(BaseCommand, Generic[T]):
    """
    Binds a target to an operation that acts on it.

    Both are stored by reference and cannot be rebound. Nothing is validated
    here: a non-callable operation only fails once execute() is called.
    """
    def __init__(self, target: T, operation: Operation):
        self._target = target
        self._operation = operation

    @property
    def target(self) -> T:
        return self._target

    @property
    def operation(self) -> Operation:
        return self._operation

    def execute(self) -> None:
        """Applies the operation to the target. Errors propagate unchanged."""
        logger.debug(f"Executing {self!r}")
        self._operation(self._target)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(target={self._target!r}, operation={_describe(self._operation)})"


class ReversibleCommand(Command[T], Reversible):
    """
    A Command that also carries an inverse operation for the same target.

    The two operations being inverses is the caller's contract. Any value the
    inverse restores must be captured before the command is built, e.g.::

        old = player.health
        ReversibleCommand(player, methodcaller("set_health", 0),
                          methodcaller("set_health", old))

    Reading ``player.health`` inside the inverse at undo time would restore
    the already-modified value instead.
    """
    def __init__(self, target: T, operation: Operation, undo_operation: Operation):
        super().__init__(target, operation)
        self._undo_operation = undo_operation

    @property
    def undo_operation(self) -> Operation:
        return self._undo_operation

    def undo(self) -> None:
        """Applies the inverse operation to the target. No ordering with execute() is enforced."""
        logger.debug(f"Undoing {self!r}")
        self._undo_operation(self._target)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(target={self._target!r}, "
            f"operation={_describe(self._operation)}, "
            f"undo_operation={_describe(self._undo_operation)})"
        )


def as_reversible(command: Any) -> Optional[Reversible]:
    """
    Returns the command itself if it supports undo(), otherwise None.
    Never raises and never touches the command's target.
    """
    if isinstance(command, Reversible):
        return command
    return None


def is_reversible(command: Any) -> bool:
    return as_reversible(command) is not None
