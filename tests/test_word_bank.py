import random
import unittest

from wordsearch.core.constants import ALL_DIRECTIONS, DEFAULT_DIRECTIONS
from wordsearch.core.exceptions import ConfigurationError
from wordsearch.data.levels import (
    TOTAL_BOARDS,
    Tier,
    config_for_board,
    directions_for_level,
    grid_size_for_level,
    level_config,
    level_for_board,
)
from wordsearch.data.word_bank import (
    BIBLE_WORDS,
    CLASSIC_WORDS,
    all_words,
    sample_words,
    words_for_board,
)


class WordBankTests(unittest.TestCase):
    def test_all_words_is_unique_and_ordered(self) -> None:
        words = all_words()
        self.assertEqual(len(words), len(set(words)))
        self.assertEqual(words[0], BIBLE_WORDS["easy"][0])
        # NAZARETH is listed under medium and places
        self.assertEqual(words.count("NAZARETH"), 1)

    def test_all_words_by_category(self) -> None:
        self.assertEqual(all_words(["names"])[:3], ["MOISE", "ABRAHAM", "DAVID"])
        with self.assertRaises(ConfigurationError):
            all_words(["psalms"])

    def test_sample_words_distinct(self) -> None:
        picked = sample_words(6, rng=random.Random(1))
        self.assertEqual(len(picked), 6)
        self.assertEqual(len(set(picked)), 6)
        for word in picked:
            self.assertIn(word, CLASSIC_WORDS)

    def test_sample_words_caps_at_pool_size(self) -> None:
        self.assertCountEqual(sample_words(10, words=["A", "B", "A"]), ["A", "B"])

    def test_words_for_board_is_deterministic(self) -> None:
        self.assertEqual(words_for_board(3, 8), words_for_board(3, 8))
        self.assertNotEqual(words_for_board(3, 8), words_for_board(4, 8))

    def test_words_for_board_length_bands(self) -> None:
        for word in words_for_board(0, 8):
            self.assertTrue(3 <= len(word) <= 7, word)
        for word in words_for_board(70, 18):
            self.assertTrue(4 <= len(word) <= 12, word)
        for word in words_for_board(155, 24):
            self.assertGreaterEqual(len(word), 3)
        self.assertEqual(len(words_for_board(155, 24)), 24)


class LevelTests(unittest.TestCase):
    def test_tiers(self) -> None:
        self.assertEqual(level_config(1).tier, Tier.ECODIM)
        self.assertEqual(level_config(1).word_count, 8)
        self.assertEqual(level_config(5).tier, Tier.JEUNESSE)
        self.assertEqual(level_config(12).word_count, 18)
        self.assertEqual(level_config(25).tier, Tier.MAITRE)
        with self.assertRaises(ConfigurationError):
            level_config(0)

    def test_jeunesse_boards_sum_to_fifty(self) -> None:
        total = sum(level_config(level).boards_in_level for level in range(2, 11))
        self.assertEqual(total, 50)
        self.assertEqual(level_config(10).boards_in_level, 2)

    def test_level_for_board_matches_start_index(self) -> None:
        for level in range(1, 31):
            self.assertEqual(level_for_board(level_config(level).board_start_index), level)
        self.assertEqual(level_for_board(TOTAL_BOARDS - 1), 30)

    def test_grid_sizes_and_directions(self) -> None:
        self.assertEqual(grid_size_for_level(1), (10, 10))
        self.assertEqual(grid_size_for_level(4), (12, 12))
        self.assertEqual(grid_size_for_level(15), (14, 14))
        self.assertEqual(grid_size_for_level(22), (16, 16))
        self.assertEqual(directions_for_level(10), DEFAULT_DIRECTIONS)
        self.assertEqual(directions_for_level(11), ALL_DIRECTIONS)

    def test_config_for_board(self) -> None:
        config, words = config_for_board(65, seed=3)
        self.assertEqual((config.width, config.height), (14, 14))
        self.assertEqual(config.directions, ALL_DIRECTIONS)
        self.assertEqual(config.seed, 3)
        self.assertEqual(len(words), 18)
        with self.assertRaises(ConfigurationError):
            config_for_board(-1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
