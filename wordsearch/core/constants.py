"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .exceptions import ConfigurationError


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_RETRY_BUDGET = 100
CLASSIC_RETRY_BUDGET = 50


class Direction(str, Enum):
    """Orientations a word may be laid out along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal-down"
    DIAGONAL_UP = "diagonal-up"

    @property
    def step(self) -> Tuple[int, int]:
        return _STEPS[self]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept enum members or their string values (``diagonal_up`` works too)."""

        if isinstance(value, Direction):
            return value
        key = str(value).strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown direction: {value!r}") from exc


_STEPS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}

ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.HORIZONTAL,
    Direction.VERTICAL,
    Direction.DIAGONAL_DOWN,
    Direction.DIAGONAL_UP,
)
ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = (Direction.HORIZONTAL, Direction.VERTICAL)
DEFAULT_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.HORIZONTAL,
    Direction.VERTICAL,
    Direction.DIAGONAL_DOWN,
)


class WordOrdering(str, Enum):
    """Order in which words are offered to the placement loop."""

    LENGTH_DESC = "length"
    SHUFFLE = "shuffle"

    @classmethod
    def parse(cls, value: Union["WordOrdering", str]) -> "WordOrdering":
        if isinstance(value, WordOrdering):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown word ordering: {value!r}") from exc


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
