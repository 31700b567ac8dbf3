import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

import requests

from wordsearch.core.exceptions import WordListError, WordSourceError
from wordsearch.data.normalization import clean_word, normalize_word
from wordsearch.data.word_list import parse_words_file, parse_words_text
from wordsearch.io.word_source import RemoteWordListClient


class NormalizationTests(unittest.TestCase):
    def test_normalize_word_uppercases_and_strips(self) -> None:
        self.assertEqual(normalize_word("  jésus "), "JÉSUS")
        self.assertEqual(normalize_word(""), "")

    def test_clean_word_folds_accents(self) -> None:
        self.assertEqual(clean_word("prière"), "PRIERE")
        self.assertEqual(clean_word("Cœur"), "COEUR")
        self.assertEqual(clean_word("Noé-l'Ancien"), "NOELANCIEN")


class WordListFileTests(unittest.TestCase):
    def test_comments_and_blank_lines_are_skipped(self) -> None:
        text = "# psaumes\nlouange\n\n  gloire  \n# fin\nÉternel\n"
        self.assertEqual(parse_words_text(text), ["LOUANGE", "GLOIRE", "ETERNEL"])

    def test_parse_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("paix\njoie\n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["PAIX", "JOIE"])

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(WordListError):
                parse_words_file(Path(tmpdir) / "absent.txt")


class RemoteWordListClientTests(unittest.TestCase):
    def make_client(self, body: str) -> RemoteWordListClient:
        response = MagicMock()
        response.text = body
        session = MagicMock()
        session.get.return_value = response
        return RemoteWordListClient(timeout_seconds=5.0, session=session)

    def test_json_array(self) -> None:
        client = self.make_client('["foi", "espérance", ""]')
        self.assertEqual(client.fetch("https://example.test/words"), ["FOI", "ESPERANCE"])
        client.session.get.assert_called_once_with("https://example.test/words", timeout=5.0)

    def test_json_object_with_words(self) -> None:
        client = self.make_client('{"theme": "noel", "words": ["berger", "mage"]}')
        self.assertEqual(client.fetch("https://example.test/noel"), ["BERGER", "MAGE"])

    def test_plain_text(self) -> None:
        client = self.make_client("etoile\n# comment\ncreche\n")
        self.assertEqual(client.fetch("https://example.test/txt"), ["ETOILE", "CRECHE"])

    def test_bad_payload_raises(self) -> None:
        with self.assertRaises(WordSourceError):
            self.make_client('{"words": [1, 2]}').fetch("https://example.test/bad")
        with self.assertRaises(WordSourceError):
            self.make_client("[not json").fetch("https://example.test/bad")

    def test_request_failure_is_wrapped(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("offline")
        client = RemoteWordListClient(session=session)
        with self.assertRaises(WordSourceError):
            client.fetch("https://example.test/down")

    def test_http_error_is_wrapped(self) -> None:
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404")
        session = MagicMock()
        session.get.return_value = response
        with self.assertRaises(WordSourceError):
            RemoteWordListClient(session=session).fetch("https://example.test/missing")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
