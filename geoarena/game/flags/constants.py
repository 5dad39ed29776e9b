from __future__ import annotations

from dataclasses import dataclass

from geoarena.game.types import Difficulty


@dataclass(frozen=True, slots=True)
class FlagSprintConfig:
    total_time: int
    base_points: int
    streak_multiplier_step: int
    max_multiplier: int
    wrong_penalty: int
    skip_penalty: int


FLAG_SPRINT_CONFIGS: dict[Difficulty, FlagSprintConfig] = {
    Difficulty.EASY: FlagSprintConfig(
        total_time=60,
        base_points=10,
        streak_multiplier_step=3,
        max_multiplier=3,
        wrong_penalty=0,
        skip_penalty=0,
    ),
    Difficulty.MEDIUM: FlagSprintConfig(
        total_time=60,
        base_points=10,
        streak_multiplier_step=3,
        max_multiplier=4,
        wrong_penalty=5,
        skip_penalty=0,
    ),
    Difficulty.HARD: FlagSprintConfig(
        total_time=45,
        base_points=10,
        streak_multiplier_step=5,
        max_multiplier=5,
        wrong_penalty=10,
        skip_penalty=5,
    ),
}

FLAG_CDN_URL = "https://flagcdn.com/w{width}/{code}.png"
