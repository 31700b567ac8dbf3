"""Deterministic rule validation for generated word searches."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.constants import Bounds
from ..core.exceptions import ValidationError
from ..core.models import WordSearchResult
from ..data.normalization import normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Checks a finished puzzle against the generator's guarantees.

    Unlike a fail-fast check, every rule runs and all problems are reported.
    """

    def validate(
        self, result: WordSearchResult, words: Optional[Iterable[str]] = None
    ) -> ValidationResult:
        messages: List[str] = []
        messages.extend(self._check_shape(result))
        if not messages:
            messages.extend(self._check_letters(result))
            messages.extend(self._check_placements(result))
            messages.extend(self._check_overlaps(result))
        messages.extend(self._check_placed_list(result))
        if words is not None:
            messages.extend(self._check_subset(result, words))
        for message in messages:
            LOGGER.error("Validation failed: %s", message)
        return ValidationResult(ok=not messages, messages=messages)

    def validate_or_raise(
        self, result: WordSearchResult, words: Optional[Iterable[str]] = None
    ) -> None:
        validation = self.validate(result, words)
        if not validation.ok:
            raise ValidationError(f"Puzzle validation failed: {validation.messages}")

    def _check_shape(self, result: WordSearchResult) -> List[str]:
        if not result.grid:
            return ["Grid has no rows"]
        width = len(result.grid[0])
        if width == 0:
            return ["Grid has no columns"]
        return [
            f"Row {r} has {len(row)} cells, expected {width}"
            for r, row in enumerate(result.grid)
            if len(row) != width
        ]

    def _check_letters(self, result: WordSearchResult) -> List[str]:
        messages = []
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if not isinstance(letter, str) or len(letter) != 1:
                    messages.append(f"Cell ({r},{c}) does not hold a single character: {letter!r}")
                elif not letter.isalpha() or not letter.isupper():
                    messages.append(f"Invalid letter {letter!r} at ({r},{c})")
        return messages

    def _check_placements(self, result: WordSearchResult) -> List[str]:
        bounds = Bounds(rows=result.height, cols=result.width)
        messages = []
        for placed in result.placements:
            cells = placed.cells
            if not cells:
                messages.append(f"Empty word recorded at {placed.start}")
                continue
            if cells[-1] != placed.end:
                messages.append(
                    f"{placed.word} recorded end {placed.end} does not match its run"
                )
            outside = [cell for cell in cells if not bounds.contains(*cell)]
            if outside:
                messages.append(f"{placed.word} leaves the grid at {outside[0]}")
                continue
            text = "".join(result.grid[r][c] for r, c in cells)
            if text != placed.word:
                messages.append(
                    f"{placed.word} reads {text!r} from {placed.start} going {placed.direction.value}"
                )
        return messages

    def _check_overlaps(self, result: WordSearchResult) -> List[str]:
        expected: Dict[Tuple[int, int], Tuple[str, str]] = {}
        messages = []
        for placed in result.placements:
            for index, cell in enumerate(placed.cells):
                letter = placed.word[index]
                seen = expected.get(cell)
                if seen is None:
                    expected[cell] = (letter, placed.word)
                elif seen[0] != letter:
                    messages.append(
                        f"{placed.word} and {seen[1]} disagree at {cell}: {letter} vs {seen[0]}"
                    )
        return messages

    def _check_placed_list(self, result: WordSearchResult) -> List[str]:
        recorded = [placed.word for placed in result.placements]
        if recorded != list(result.placed_words):
            return ["placed_words does not match the placement records"]
        return []

    def _check_subset(self, result: WordSearchResult, words: Iterable[str]) -> List[str]:
        available = Counter(normalize_word(word) for word in words)
        used = Counter(result.placed_words)
        return [
            f"{word} placed {count} times but supplied {available[word]} times"
            for word, count in used.items()
            if count > available[word]
        ]
