"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


Coord = Tuple[int, int]


def _cells_along(row: int, col: int, direction: Direction, length: int) -> List[Coord]:
    dr, dc = direction.step
    return [(row + i * dr, col + i * dc) for i in range(length)]


@dataclass(frozen=True)
class Placement:
    """A candidate run: a word anchored at ``(row, col)`` along ``direction``."""

    word: str
    row: int
    col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Coord]:
        return _cells_along(self.row, self.col, self.direction, self.length)

    @property
    def end(self) -> Coord:
        dr, dc = self.direction.step
        offset = self.length - 1
        return (self.row + offset * dr, self.col + offset * dc)


@dataclass
class PlacedWord:
    """A word committed to the grid, with the coordinates of both ends."""

    word: str
    start: Coord
    end: Coord
    direction: Direction

    @classmethod
    def from_placement(cls, placement: Placement) -> "PlacedWord":
        return cls(
            word=placement.word,
            start=(placement.row, placement.col),
            end=placement.end,
            direction=placement.direction,
        )

    @property
    def cells(self) -> List[Coord]:
        return _cells_along(self.start[0], self.start[1], self.direction, len(self.word))

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start": {"r": self.start[0], "c": self.start[1]},
            "end": {"r": self.end[0], "c": self.end[1]},
            "direction": self.direction.value,
        }


@dataclass
class WordSearchResult:
    """Finished puzzle: the letter grid and the words actually hidden in it.

    ``placed_words`` is authoritative. Inputs that could not be placed are
    listed in ``dropped_words`` and must not be assumed present in the grid.
    """

    grid: List[List[str]]
    placed_words: List[str]
    placements: List[PlacedWord] = field(default_factory=list)
    dropped_words: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def all_placed(self) -> bool:
        return not self.dropped_words

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "placed_words": list(self.placed_words),
            "placements": [placed.to_jsonable() for placed in self.placements],
            "dropped_words": list(self.dropped_words),
            "seed": self.seed,
        }
