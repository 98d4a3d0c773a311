"""Actions a player can take on its turn, and their text form."""

from enum import Enum
from typing import Optional


class ActionType(Enum):
    WAIT = "WAIT"
    SEED = "SEED"
    GROW = "GROW"
    COMPLETE = "COMPLETE"


class InvalidActionError(Exception):
    """Raised when an action line cannot be understood."""
    pass


# Number of integer arguments each action takes on the wire
_ARITY = {
    ActionType.WAIT: 0,
    ActionType.SEED: 2,
    ActionType.GROW: 1,
    ActionType.COMPLETE: 1,
}


class Action:
    """One move: WAIT, SEED origin->target, GROW cell or COMPLETE cell.

    ``target`` is the cell acted upon (the seeded cell for SEED) and
    ``origin`` is only set for SEED. ``message`` is free text shown by the
    judge next to the move; it takes no part in equality.
    """

    __slots__ = ("type", "target", "origin", "message")

    def __init__(
        self,
        action_type: ActionType,
        target: Optional[int] = None,
        origin: Optional[int] = None,
        message: str = "",
    ):
        self.type = action_type
        self.target = target
        self.origin = origin
        self.message = message

    @classmethod
    def wait(cls, message: str = "") -> "Action":
        return cls(ActionType.WAIT, message=message)

    @classmethod
    def seed(cls, origin: int, target: int, message: str = "") -> "Action":
        return cls(ActionType.SEED, target=target, origin=origin, message=message)

    @classmethod
    def grow(cls, target: int, message: str = "") -> "Action":
        return cls(ActionType.GROW, target=target, message=message)

    @classmethod
    def complete(cls, target: int, message: str = "") -> "Action":
        return cls(ActionType.COMPLETE, target=target, message=message)

    @classmethod
    def parse(cls, line: str) -> "Action":
        """Parse a legal-action line such as ``SEED 5 19``.

        Raises:
            InvalidActionError: If the keyword is unknown, the number of
                arguments is wrong or an argument is not an integer.
        """
        parts = line.split()
        if not parts:
            raise InvalidActionError("Empty action line")

        try:
            action_type = ActionType(parts[0].upper())
        except ValueError:
            raise InvalidActionError(f"Unknown action '{parts[0]}'")

        args = parts[1:]
        if len(args) != _ARITY[action_type]:
            raise InvalidActionError(
                f"{action_type.value} takes {_ARITY[action_type]} "
                f"arguments, got {len(args)}: '{line}'"
            )
        try:
            numbers = [int(a) for a in args]
        except ValueError:
            raise InvalidActionError(f"Non-integer cell index in '{line}'")

        if action_type == ActionType.WAIT:
            return cls.wait()
        if action_type == ActionType.SEED:
            return cls.seed(numbers[0], numbers[1])
        return cls(action_type, target=numbers[0])

    def with_message(self, message: str) -> "Action":
        """Return a copy of this action carrying a debug message."""
        return Action(self.type, self.target, self.origin, message)

    def to_command(self) -> str:
        """Return the output line, including the debug message if any."""
        if self.message:
            return f"{self} {self.message}"
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return (
            self.type == other.type
            and self.target == other.target
            and self.origin == other.origin
        )

    def __hash__(self) -> int:
        return hash((self.type, self.target, self.origin))

    def __repr__(self) -> str:
        return f"Action({self})"

    def __str__(self) -> str:
        if self.type == ActionType.WAIT:
            return "WAIT"
        if self.type == ActionType.SEED:
            return f"SEED {self.origin} {self.target}"
        return f"{self.type.value} {self.target}"
