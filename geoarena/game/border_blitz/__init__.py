from geoarena.game.border_blitz.rules import (
    border_blitz_stats,
    can_skip,
    create_game,
    pick_anchor,
    skip_anchor,
    submit_guess,
    use_hint,
)
from geoarena.game.border_blitz.types import (
    BlitzGuess,
    BlitzGuessResult,
    BorderBlitzState,
    BorderBlitzStats,
)
from geoarena.game.timed import end_game, start_playing, tick_countdown, tick_game

__all__ = [
    "BlitzGuess",
    "BlitzGuessResult",
    "BorderBlitzState",
    "BorderBlitzStats",
    "border_blitz_stats",
    "can_skip",
    "create_game",
    "end_game",
    "pick_anchor",
    "skip_anchor",
    "start_playing",
    "submit_guess",
    "tick_countdown",
    "tick_game",
    "use_hint",
]
