"""Route scoring. Lower is better; the score is always derived from the state, never accumulated."""

from __future__ import annotations

from geoarena.game.connect.constants import (
    SCORE_CORRECT_MOVE,
    SCORE_HINT_USED,
    SCORE_TIMEOUT,
    SCORE_WRONG_MOVE,
)
from geoarena.game.connect.types import ConnectGameState, RouteRating, ScoreBreakdown
from geoarena.game.stats import round_half_up

RATING_BUCKETS: tuple[tuple[float, RouteRating], ...] = (
    (1.0, RouteRating(label="PERFECT", color="#f59e0b")),
    (1.5, RouteRating(label="GREAT", color="#22c55e")),
    (2.5, RouteRating(label="GOOD", color="#3b82f6")),
    (4.0, RouteRating(label="OK", color="#94a3b8")),
)
FALLBACK_RATING = RouteRating(label="KEEP TRYING", color="#ef4444")


def moves_taken(state: ConnectGameState) -> int:
    # The start country sits in the path but is never typed.
    return max(len(state.player_path) - 1, 0)


def optimal_moves(state: ConnectGameState) -> int:
    return max(len(state.optimal_path) - 2, 0)


def calculate_score(state: ConnectGameState) -> int:
    return score_breakdown(state).total


def score_breakdown(state: ConnectGameState) -> ScoreBreakdown:
    moves = moves_taken(state)
    wrong_penalty = state.wrong_attempts * SCORE_WRONG_MOVE
    hint_penalty = state.hints_used * SCORE_HINT_USED
    timeout_penalty = SCORE_TIMEOUT if state.is_timeout else 0
    total = moves * SCORE_CORRECT_MOVE + wrong_penalty + hint_penalty + timeout_penalty
    optimal = optimal_moves(state)

    if optimal > 0:
        efficiency = round_half_up(optimal / max(total, 1) * 100)
    else:
        efficiency = 100

    return ScoreBreakdown(
        moves=moves,
        wrong_penalty=wrong_penalty,
        hint_penalty=hint_penalty,
        timeout_penalty=timeout_penalty,
        total=total,
        optimal_moves=optimal,
        efficiency=efficiency,
    )


def rating(score: int, optimal: int) -> RouteRating:
    ratio = score / max(optimal, 1)
    for threshold, bucket in RATING_BUCKETS:
        if ratio <= threshold:
            return bucket
    return FALLBACK_RATING
