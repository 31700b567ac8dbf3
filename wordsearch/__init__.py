"""Word-search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate``: one puzzle from a word list.
- ``wordsearch.engine.generator.WordSearchGenerator``: reusable generator.
- ``wordsearch.engine.validator.GridValidator``: checks a finished puzzle.
- ``wordsearch.data.levels`` helpers: progression presets per board.
"""

from .core.constants import Direction, WordOrdering
from .core.models import PlacedWord, WordSearchResult
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate
from .engine.validator import GridValidator

__all__ = [
    "Direction",
    "GeneratorConfig",
    "GridValidator",
    "PlacedWord",
    "WordOrdering",
    "WordSearchGenerator",
    "WordSearchResult",
    "generate",
]

__version__ = "0.1.0"
