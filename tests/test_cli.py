import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main


def run_cli(*argv: str):
    stdout = io.StringIO()
    with redirect_stdout(stdout):
        code = main.main(list(argv))
    return code, stdout.getvalue()


class CliTests(unittest.TestCase):
    def test_explicit_words_json_output(self) -> None:
        code, out = run_cli("--size", "8", "--words", "jesus", "dieu", "--seed", "1",
                            "--directions", "horizontal", "vertical")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(len(payload["grid"]), 8)
        self.assertCountEqual(payload["placed_words"], ["JESUS", "DIEU"])
        self.assertEqual(payload["validation"], [])
        for placement in payload["placements"]:
            self.assertIn(placement["direction"], {"horizontal", "vertical"})

    def test_board_preset(self) -> None:
        code, out = run_cli("--board", "0", "--seed", "2")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(len(payload["grid"]), 10)
        self.assertEqual(len(payload["placed_words"]) + len(payload["dropped_words"]), 8)

    def test_classic_samples_bank_words(self) -> None:
        code, out = run_cli("--classic", "--count", "4", "--seed", "3")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(len(payload["grid"]), 10)
        self.assertEqual(len(payload["grid"][0]), 10)

    def test_words_file_and_output_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("# fruits\nfigue\ndatte\n", encoding="utf-8")
            output = Path(tmpdir) / "puzzle.json"
            code, out = run_cli("--width", "9", "--height", "6", "--words-file", str(words),
                                "--output", str(output), "--seed", "4")
            self.assertEqual(code, 0)
            self.assertEqual(out, "")
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(len(payload["grid"]), 6)
            self.assertEqual(len(payload["grid"][0]), 9)

    def test_pretty_output(self) -> None:
        code, out = run_cli("--size", "6", "--words", "paix", "--seed", "5", "--pretty")
        self.assertEqual(code, 0)
        self.assertIn("--- Words ---", out)
        self.assertIn("PAIX", out)

    def test_invalid_size_reports_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code, _ = run_cli("--size", "0", "--words", "foi")
        self.assertEqual(code, 1)
        self.assertIn("error:", stderr.getvalue())

    def test_conflicting_flags_exit(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                run_cli("--board", "1", "--level", "2")
            with self.assertRaises(SystemExit):
                run_cli("--size", "5", "--width", "6")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
