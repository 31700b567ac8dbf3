"""Word-search puzzle generation.

Words are placed one at a time by bounded random search: for each word a
fixed number of (direction, start cell) candidates is drawn and the first
feasible one is committed. Words that find no slot are dropped. Remaining
cells are then filled with random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from ..core.constants import (
    ALPHABET,
    CLASSIC_RETRY_BUDGET,
    DEFAULT_DIRECTIONS,
    DEFAULT_RETRY_BUDGET,
    ORTHOGONAL_DIRECTIONS,
    Direction,
    WordOrdering,
)
from ..core.exceptions import ConfigurationError
from ..core.models import Placement, PlacedWord, WordSearchResult
from ..data.normalization import is_letter_word, normalize_word
from ..utils.logger import get_logger
from .grid import WordSearchGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    directions: Sequence[Union[Direction, str]] = DEFAULT_DIRECTIONS
    retry_budget: int = DEFAULT_RETRY_BUDGET
    ordering: Union[WordOrdering, str] = WordOrdering.LENGTH_DESC
    seed: Optional[int] = None
    alphabet: str = ALPHABET

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if isinstance(self.directions, (str, Direction)):
            self.directions = [self.directions]
        parsed: List[Direction] = []
        for value in self.directions:
            direction = Direction.parse(value)
            if direction not in parsed:
                parsed.append(direction)
        if not parsed:
            raise ConfigurationError("At least one direction is required")
        self.directions = tuple(parsed)
        if self.retry_budget < 0:
            raise ConfigurationError(f"Retry budget must be >= 0, got {self.retry_budget}")
        self.ordering = WordOrdering.parse(self.ordering)
        if not is_letter_word(self.alphabet):
            raise ConfigurationError(
                f"Filler alphabet must be non-empty uppercase letters, got {self.alphabet!r}"
            )

    @classmethod
    def classic(cls, size: int = 10, seed: Optional[int] = None) -> "GeneratorConfig":
        """Square grid, horizontal and vertical only, shuffled words, budget 50."""

        return cls(
            width=size,
            height=size,
            directions=ORTHOGONAL_DIRECTIONS,
            retry_budget=CLASSIC_RETRY_BUDGET,
            ordering=WordOrdering.SHUFFLE,
            seed=seed,
        )


class WordSearchGenerator:
    """Builds one puzzle per :meth:`generate` call from a word list."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Iterable[str]) -> WordSearchResult:
        config = self.config
        grid = WordSearchGrid(config.width, config.height)
        ordered = self._order_words([normalize_word(word) for word in words])
        LOGGER.info(
            "Generating %sx%s word search with %s words (%s)",
            config.width,
            config.height,
            len(ordered),
            ", ".join(d.value for d in config.directions),
        )

        placements: List[PlacedWord] = []
        dropped: List[str] = []
        for word in ordered:
            if not word:
                LOGGER.debug("Skipping empty word")
                continue
            if not is_letter_word(word):
                LOGGER.debug("Dropping %s: contains characters that are not letters", word)
                dropped.append(word)
                continue
            placed = self._place_word(grid, word)
            if placed is None:
                dropped.append(word)
                continue
            placements.append(placed)

        grid.fill_empty(self.rng, config.alphabet)
        LOGGER.info(
            "Placed %s/%s words, dropped %s",
            len(placements),
            len(placements) + len(dropped),
            len(dropped),
        )
        return WordSearchResult(
            grid=grid.rows(),
            placed_words=[placed.word for placed in placements],
            placements=placements,
            dropped_words=dropped,
            seed=config.seed,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _order_words(self, words: List[str]) -> List[str]:
        if self.config.ordering == WordOrdering.SHUFFLE:
            shuffled = list(words)
            self.rng.shuffle(shuffled)
            return shuffled
        # sorted() is stable, so equal lengths keep input order
        return sorted(words, key=len, reverse=True)

    def _place_word(self, grid: WordSearchGrid, word: str) -> Optional[PlacedWord]:
        directions = self.config.directions
        if not any(len(word) <= grid.max_span(direction) for direction in directions):
            LOGGER.debug("Dropping %s: longer than every allowed span", word)
            return None

        for attempt in range(self.config.retry_budget):
            candidate = Placement(
                word=word,
                row=self.rng.randrange(grid.height),
                col=self.rng.randrange(grid.width),
                direction=self.rng.choice(directions),
            )
            if grid.can_place(candidate):
                LOGGER.debug(
                    "Placed %s at %s going %s after %s attempts",
                    word,
                    (candidate.row, candidate.col),
                    candidate.direction.value,
                    attempt + 1,
                )
                return grid.place(candidate)

        LOGGER.debug("Dropping %s after %s attempts", word, self.config.retry_budget)
        return None


def generate(
    words: Iterable[str],
    config: GeneratorConfig,
    rng: Optional[random.Random] = None,
) -> WordSearchResult:
    """Generate a single puzzle; see :class:`WordSearchGenerator`."""

    return WordSearchGenerator(config, rng=rng).generate(words)
