from __future__ import annotations

from dataclasses import dataclass

from geoarena.game.types import Difficulty


@dataclass(frozen=True, slots=True)
class BorderBlitzConfig:
    total_time: int
    min_neighbors: int
    max_neighbors: int
    points_per_neighbor: int
    wrong_penalty: int
    hint_penalty: int


BORDER_BLITZ_CONFIGS: dict[Difficulty, BorderBlitzConfig] = {
    Difficulty.EASY: BorderBlitzConfig(
        total_time=90,
        min_neighbors=2,
        max_neighbors=4,
        points_per_neighbor=10,
        wrong_penalty=0,
        hint_penalty=5,
    ),
    Difficulty.MEDIUM: BorderBlitzConfig(
        total_time=75,
        min_neighbors=4,
        max_neighbors=6,
        points_per_neighbor=10,
        wrong_penalty=3,
        hint_penalty=10,
    ),
    Difficulty.HARD: BorderBlitzConfig(
        total_time=60,
        min_neighbors=7,
        max_neighbors=99,
        points_per_neighbor=10,
        wrong_penalty=5,
        hint_penalty=15,
    ),
}

RELAXED_NEIGHBOR_RANGE = (1, 99)
FALLBACK_ANCHOR = "DE"
SKIP_UNLOCK_WRONG_ATTEMPTS = 2
