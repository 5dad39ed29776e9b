from geoarena.game.map_quiz.rules import (
    create_game,
    current_multiplier,
    map_quiz_stats,
    skip_country,
    submit_click,
)
from geoarena.game.map_quiz.types import MapClickResult, MapQuizAttempt, MapQuizState, MapQuizStats
from geoarena.game.timed import end_game, start_playing, tick_countdown, tick_game

__all__ = [
    "MapClickResult",
    "MapQuizAttempt",
    "MapQuizState",
    "MapQuizStats",
    "create_game",
    "current_multiplier",
    "end_game",
    "map_quiz_stats",
    "skip_country",
    "start_playing",
    "submit_click",
    "tick_countdown",
    "tick_game",
]
