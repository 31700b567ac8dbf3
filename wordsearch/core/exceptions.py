"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError, ValueError):
    """Raised when a grid or generator configuration is invalid."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be written into the grid at a given run."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""


class WordListError(WordSearchError):
    """Raised when a word list file cannot be read."""


class WordSourceError(WordSearchError):
    """Raised when a remote word list cannot be fetched or decoded."""
