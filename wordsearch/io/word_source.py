"""Lightweight HTTP loader for remote word lists."""

from __future__ import annotations

import json
from typing import Any, List, Optional

import requests

from ..core.exceptions import WordSourceError
from ..data.normalization import clean_word
from ..data.word_list import parse_words_text
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class RemoteWordListClient:
    """Fetches a themed word list from a URL.

    Accepted payloads: a JSON array of strings, a JSON object with a
    ``words`` array, or plain text with one word per line.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def fetch(self, url: str) -> List[str]:
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordSourceError(f"Word list request failed: {exc}") from exc

        words = self._extract_words(response.text)
        LOGGER.info("Fetched %s words from %s", len(words), url)
        return words

    @staticmethod
    def _extract_words(body: str) -> List[str]:
        stripped = body.strip()
        if not stripped.startswith(("[", "{")):
            return parse_words_text(body)
        try:
            payload: Any = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise WordSourceError(f"Malformed JSON word list: {exc}") from exc
        if isinstance(payload, dict):
            payload = payload.get("words")
        if not isinstance(payload, list) or not all(isinstance(item, str) for item in payload):
            LOGGER.warning("Unexpected word list payload: %.200s", stripped)
            raise WordSourceError("Word list payload must be a list of strings")
        return [word for word in (clean_word(item) for item in payload) if word]
