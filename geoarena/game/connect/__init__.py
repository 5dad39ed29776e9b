from geoarena.game.connect.rules import (
    can_skip,
    connect_stats,
    create_game,
    find_route,
    handle_move_timeout,
    handle_timeout,
    skip_route,
    start_execution,
    submit_move,
    tick_execution,
    tick_move,
    tick_reveal,
    use_hint,
)
from geoarena.game.connect.scoring import calculate_score, rating, score_breakdown
from geoarena.game.connect.types import (
    ConnectGameState,
    ConnectResolutionPhase,
    ConnectStats,
    ExecutionPhase,
    GameMove,
    MoveResult,
    RevealPhase,
    RouteRating,
    ScoreBreakdown,
)

__all__ = [
    "ConnectGameState",
    "ConnectResolutionPhase",
    "ConnectStats",
    "ExecutionPhase",
    "GameMove",
    "MoveResult",
    "RevealPhase",
    "RouteRating",
    "ScoreBreakdown",
    "calculate_score",
    "can_skip",
    "connect_stats",
    "create_game",
    "find_route",
    "handle_move_timeout",
    "handle_timeout",
    "rating",
    "score_breakdown",
    "skip_route",
    "start_execution",
    "submit_move",
    "tick_execution",
    "tick_move",
    "tick_reveal",
    "use_hint",
]
