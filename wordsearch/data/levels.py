"""Progression presets mapping levels and boards to puzzle configurations.

Levels 1-30 are split into four tiers. Each tier fixes how many words a
board hides; the word count in turn decides the grid size, and levels from
11 upward also allow the diagonal-up direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.constants import ALL_DIRECTIONS, DEFAULT_DIRECTIONS, Direction
from ..core.exceptions import ConfigurationError
from ..engine.generator import GeneratorConfig
from .word_bank import words_for_board


class Tier(str, Enum):
    ECODIM = "ecodim"
    JEUNESSE = "jeunesse"
    DIFFICILE = "difficile"
    MAITRE = "maitre"


TIER_LABELS = {
    Tier.ECODIM: "École du Dimanche (ECODIM)",
    Tier.JEUNESSE: "JEUNESSE",
    Tier.DIFFICILE: "DIFFICILE",
    Tier.MAITRE: "MAÎTRE",
}

JEUNESSE_BOARDS = 50
JEUNESSE_BOARDS_PER_LEVEL = math.ceil(JEUNESSE_BOARDS / 9)
DIFFICILE_BOARDS_PER_LEVEL = 9
TOTAL_BOARDS = 10 + JEUNESSE_BOARDS + 90 + 10


@dataclass(frozen=True)
class LevelConfig:
    level: int
    tier: Tier
    word_count: int
    boards_in_level: int
    board_start_index: int

    @property
    def label(self) -> str:
        return TIER_LABELS[self.tier]


def level_config(level: int) -> LevelConfig:
    if level < 1:
        raise ConfigurationError(f"Level must be >= 1, got {level}")
    if level == 1:
        return LevelConfig(level, Tier.ECODIM, 8, 10, 0)
    if level <= 10:
        offset = level - 2
        # the last jeunesse level takes whatever boards remain
        boards = JEUNESSE_BOARDS_PER_LEVEL if offset < 8 else JEUNESSE_BOARDS - 8 * JEUNESSE_BOARDS_PER_LEVEL
        return LevelConfig(level, Tier.JEUNESSE, 12, boards, 10 + offset * JEUNESSE_BOARDS_PER_LEVEL)
    if level <= 20:
        offset = level - 11
        return LevelConfig(
            level, Tier.DIFFICILE, 18, DIFFICILE_BOARDS_PER_LEVEL, 60 + offset * DIFFICILE_BOARDS_PER_LEVEL
        )
    return LevelConfig(level, Tier.MAITRE, 24, 1, 150 + (level - 21))


def level_for_board(board_index: int) -> int:
    if board_index < 0:
        raise ConfigurationError(f"Board index must be >= 0, got {board_index}")
    if board_index < 10:
        return 1
    if board_index < 60:
        return 2 + min((board_index - 10) // JEUNESSE_BOARDS_PER_LEVEL, 8)
    if board_index < 150:
        return 11 + (board_index - 60) // DIFFICILE_BOARDS_PER_LEVEL
    return 21 + (board_index - 150)


def grid_size_for_level(level: int) -> Tuple[int, int]:
    """Return ``(width, height)`` for the level's word count."""

    word_count = level_config(level).word_count
    if word_count <= 8:
        return 10, 10
    if word_count <= 12:
        return 12, 12
    if word_count <= 18:
        return 14, 14
    return 16, 16


def directions_for_level(level: int) -> Tuple[Direction, ...]:
    level_config(level)
    return ALL_DIRECTIONS if level >= 11 else DEFAULT_DIRECTIONS


def config_for_board(board_index: int, seed: Optional[int] = None) -> Tuple[GeneratorConfig, List[str]]:
    """Generator configuration and word list for one progression board."""

    level = level_for_board(board_index)
    width, height = grid_size_for_level(level)
    config = GeneratorConfig(
        width=width,
        height=height,
        directions=directions_for_level(level),
        seed=seed,
    )
    return config, words_for_board(board_index, level_config(level).word_count)
