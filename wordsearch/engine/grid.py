"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import ALPHABET, Bounds, Direction
from ..core.exceptions import PlacementError, WordSearchError
from ..core.models import Placement, PlacedWord
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

EMPTY_SYMBOL = "?"


class WordSearchGrid:
    """Letter grid of ``height`` rows by ``width`` columns.

    Each cell is ``None`` while placement is in progress, or holds exactly
    one uppercase letter.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise WordSearchError(f"Grid dimensions must be positive, got {width}x{height}")
        self.bounds = Bounds(rows=height, cols=width)
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(width)] for _ in range(height)
        ]
        self._filled_count = 0

    @property
    def width(self) -> int:
        return self.bounds.cols

    @property
    def height(self) -> int:
        return self.bounds.rows

    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is None

    @property
    def empty_count(self) -> int:
        return self.width * self.height - self._filled_count

    @property
    def is_complete(self) -> bool:
        return self.empty_count == 0

    def max_span(self, direction: Direction) -> int:
        """Longest run the grid shape allows along ``direction``."""

        dr, dc = direction.step
        if dr == 0:
            return self.width
        if dc == 0:
            return self.height
        return min(self.width, self.height)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def can_place(self, placement: Placement) -> bool:
        """Return True when every cell of the run is in bounds and compatible.

        A cell already holding the same letter is compatible, so words may
        cross each other.
        """

        for index, (row, col) in enumerate(placement.cells):
            if not self.bounds.contains(row, col):
                return False
            existing = self.cells[row][col]
            if existing is not None and existing != placement.word[index]:
                return False
        return True

    def place(self, placement: Placement) -> PlacedWord:
        """Write the word into the grid and return its record."""

        cells = placement.cells
        for index, (row, col) in enumerate(cells):
            if not self.bounds.contains(row, col):
                raise PlacementError(
                    f"Word {placement.word!r} extends outside grid at {(row, col)}"
                )
            existing = self.cells[row][col]
            if existing is not None and existing != placement.word[index]:
                raise PlacementError(
                    f"Letter conflict at {(row, col)}: {existing!r} vs {placement.word[index]!r}"
                )

        # All checks passed, mutate grid
        for index, (row, col) in enumerate(cells):
            if self.cells[row][col] is None:
                self._filled_count += 1
            self.cells[row][col] = placement.word[index]
        return PlacedWord.from_placement(placement)

    def read(self, placement: Placement) -> str:
        """Return the letters along the run of ``placement`` (empty cells as ``?``)."""

        letters = []
        for row, col in placement.cells:
            if not self.bounds.contains(row, col):
                raise PlacementError(f"Run leaves the grid at {(row, col)}")
            letters.append(self.cells[row][col] or EMPTY_SYMBOL)
        return "".join(letters)

    # ------------------------------------------------------------------
    # Filler
    # ------------------------------------------------------------------
    def fill_empty(self, rng: random.Random, alphabet: Sequence[str] = ALPHABET) -> int:
        """Fill every empty cell with a uniformly random letter."""

        filled = 0
        for row in self.cells:
            for c, letter in enumerate(row):
                if letter is None:
                    row[c] = rng.choice(alphabet)
                    filled += 1
        self._filled_count += filled
        LOGGER.debug("Filled %s empty cells with random letters", filled)
        return filled

    def rows(self) -> List[List[str]]:
        """Return a plain copy of the finished grid."""

        if not self.is_complete:
            raise WordSearchError(f"Grid still has {self.empty_count} empty cells")
        return [[letter or EMPTY_SYMBOL for letter in row] for row in self.cells]
