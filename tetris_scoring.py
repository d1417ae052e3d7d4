"""Scoring and level progression"""
from typing import Tuple

SCORE_TABLE = {1: 100, 2: 300, 3: 700, 4: 1500}
POINTS_PER_LEVEL = 600
MAX_LEVEL = 10

BASE_SPEED = 1000   # ms between steps at level 1
SPEED_STEP = 100    # ms faster per level
MIN_SPEED = 100


def points_for_lines(lines: int) -> int:
    return SCORE_TABLE.get(lines, 0)


def speed_for_level(level: int) -> int:
    return max(MIN_SPEED, BASE_SPEED - (level - 1) * SPEED_STEP)


def advance_level(level: int, progress: int) -> Tuple[int, int]:
    """Spend level progress on as many level-ups as it covers, up to MAX_LEVEL.

    Returns the new (level, progress). Progress past the cap is kept.
    """
    while progress >= POINTS_PER_LEVEL and level < MAX_LEVEL:
        level += 1
        progress -= POINTS_PER_LEVEL
    return level, progress
