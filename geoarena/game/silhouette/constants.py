from __future__ import annotations

from dataclasses import dataclass

from geoarena.game.types import Difficulty


@dataclass(frozen=True, slots=True)
class SilhouetteConfig:
    total_rounds: int
    round_time: int
    max_points: int
    hint_penalty: int
    guess_penalty: int


SILHOUETTE_CONFIGS: dict[Difficulty, SilhouetteConfig] = {
    Difficulty.EASY: SilhouetteConfig(
        total_rounds=5,
        round_time=30,
        max_points=100,
        hint_penalty=15,
        guess_penalty=10,
    ),
    Difficulty.MEDIUM: SilhouetteConfig(
        total_rounds=8,
        round_time=20,
        max_points=100,
        hint_penalty=20,
        guess_penalty=15,
    ),
    Difficulty.HARD: SilhouetteConfig(
        total_rounds=10,
        round_time=15,
        max_points=100,
        hint_penalty=25,
        guess_penalty=20,
    ),
}

MIN_SOLVE_POINTS = 10
MAX_NEIGHBOR_HINTS = 3

# Too small to render as a recognizable outline at 110m resolution; excluded at every difficulty.
TINY_SILHOUETTE_CODES: frozenset[str] = frozenset(
    {
        "AD", "MC", "SM", "VA", "LI", "MT", "SG", "BH", "MV",
        "SC", "CV", "ST", "AG", "BB", "DM", "GD", "KN", "LC", "VC",
        "WS", "TO", "MU",
    }
)
