from geoarena.game.silhouette.rules import (
    build_hints,
    create_game,
    handle_round_timeout,
    next_round,
    reveal_hint,
    silhouette_stats,
    skip_round,
    submit_guess,
    tick_round,
)
from geoarena.game.silhouette.types import (
    HintType,
    RoundPlayingPhase,
    RoundResultPhase,
    SilhouetteGuessResult,
    SilhouetteHint,
    SilhouetteResolutionPhase,
    SilhouetteRound,
    SilhouetteState,
    SilhouetteStats,
)

__all__ = [
    "HintType",
    "RoundPlayingPhase",
    "RoundResultPhase",
    "SilhouetteGuessResult",
    "SilhouetteHint",
    "SilhouetteResolutionPhase",
    "SilhouetteRound",
    "SilhouetteState",
    "SilhouetteStats",
    "build_hints",
    "create_game",
    "handle_round_timeout",
    "next_round",
    "reveal_hint",
    "silhouette_stats",
    "skip_round",
    "submit_guess",
    "tick_round",
]
