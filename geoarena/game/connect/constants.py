from __future__ import annotations

from dataclasses import dataclass

from geoarena.game.types import Continent, Difficulty


@dataclass(frozen=True, slots=True)
class ConnectConfig:
    min_path_length: int
    max_path_length: int
    execution_time: int
    move_time: int


CONNECT_CONFIGS: dict[Difficulty, ConnectConfig] = {
    Difficulty.EASY: ConnectConfig(min_path_length=2, max_path_length=3, execution_time=90, move_time=8),
    Difficulty.MEDIUM: ConnectConfig(min_path_length=4, max_path_length=6, execution_time=60, move_time=5),
    Difficulty.HARD: ConnectConfig(min_path_length=7, max_path_length=12, execution_time=45, move_time=4),
}

REVEAL_SECONDS = 5
MAX_ROUTE_ATTEMPTS = 100
SKIP_UNLOCK_WRONG_ATTEMPTS = 2

# Known-connected pairs used when random sampling finds no route.
FALLBACK_ROUTES: dict[Continent, tuple[str, str]] = {
    Continent.EUROPE: ("PT", "GR"),
    Continent.ASIA: ("TR", "CN"),
    Continent.AFRICA: ("MA", "ZA"),
    Continent.SOUTH_AMERICA: ("CO", "AR"),
    Continent.NORTH_AMERICA: ("US", "PA"),
}
DEFAULT_FALLBACK_ROUTE = ("PT", "CN")

SCORE_CORRECT_MOVE = 1
SCORE_WRONG_MOVE = 3
SCORE_HINT_USED = 2
SCORE_TIMEOUT = 5
