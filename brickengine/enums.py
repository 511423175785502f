"""Enumerations shared by the engine: axes, directions and kinematic modes."""

from __future__ import annotations

from enum import Enum, IntEnum


class Axis(Enum):
    """A coordinate axis."""

    X = "x"
    Y = "y"


class Direction(IntEnum):
    """Direction along an axis."""

    POSITIVE = 0
    NEGATIVE = 1


class Kinematic(Enum):
    """How an entity takes part in physics.

    Compare with ``IS_KINEMATIC`` using ``==`` or ``!=`` so that
    ``WAS_NOT_KINEMATIC`` is treated on its own terms.
    """

    IS_KINEMATIC = 0
    # Acts like IS_KINEMATIC, but reverts to IS_NOT_KINEMATIC when a child is released.
    WAS_NOT_KINEMATIC = 1
    IS_NOT_KINEMATIC = 2


class UnknownDirectionError(ValueError):
    """Raised when an integer does not name a direction."""

    def __init__(self, value: int) -> None:
        super().__init__(f"The entered direction {value} is not supported")
        self.value = value


def direction_from_int(value: int) -> Direction:
    """Return the direction for 0 or 1, raising for anything else."""
    if value < 0 or value > 1:
        raise UnknownDirectionError(value)
    return Direction(value)