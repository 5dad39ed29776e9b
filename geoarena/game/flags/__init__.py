from geoarena.game.flags.rules import (
    create_game,
    current_multiplier,
    flag_sprint_stats,
    flag_url,
    skip_flag,
    submit_guess,
)
from geoarena.game.flags.types import FlagAttempt, FlagGuessResult, FlagSprintState, FlagSprintStats
from geoarena.game.timed import end_game, start_playing, tick_countdown, tick_game

__all__ = [
    "FlagAttempt",
    "FlagGuessResult",
    "FlagSprintState",
    "FlagSprintStats",
    "create_game",
    "current_multiplier",
    "end_game",
    "flag_sprint_stats",
    "flag_url",
    "skip_flag",
    "start_playing",
    "submit_guess",
    "tick_countdown",
    "tick_game",
]
