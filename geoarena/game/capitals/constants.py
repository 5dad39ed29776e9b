from __future__ import annotations

from dataclasses import dataclass

from geoarena.game.types import Difficulty


@dataclass(frozen=True, slots=True)
class CapitalClashConfig:
    total_time: int
    base_points: int
    streak_multiplier_step: int
    max_multiplier: int
    wrong_penalty: int
    mix_directions: bool


CAPITAL_CLASH_CONFIGS: dict[Difficulty, CapitalClashConfig] = {
    Difficulty.EASY: CapitalClashConfig(
        total_time=60,
        base_points=10,
        streak_multiplier_step=3,
        max_multiplier=3,
        wrong_penalty=0,
        mix_directions=False,
    ),
    Difficulty.MEDIUM: CapitalClashConfig(
        total_time=60,
        base_points=10,
        streak_multiplier_step=3,
        max_multiplier=4,
        wrong_penalty=5,
        mix_directions=True,
    ),
    Difficulty.HARD: CapitalClashConfig(
        total_time=45,
        base_points=10,
        streak_multiplier_step=5,
        max_multiplier=5,
        wrong_penalty=10,
        mix_directions=True,
    ),
}

# Shorter partial capital answers are too ambiguous to accept.
MIN_PARTIAL_CAPITAL_LENGTH = 4
