"""Plain-text word list loading."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import WordListError
from .normalization import clean_word


def parse_words_text(text: str) -> List[str]:
    """One word per line. Blank lines and ``#`` comments are skipped."""

    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        word = clean_word(line)
        if word:
            entries.append(word)
    return entries


def parse_words_file(path: Path | str) -> List[str]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Cannot read word list {path}: {exc}") from exc
    return parse_words_text(text)
