from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import structlog

from geoarena.game.map_quiz.constants import MAP_QUIZ_CONFIGS
from geoarena.game.map_quiz.types import MapClickResult, MapQuizAttempt, MapQuizState, MapQuizStats
from geoarena.game.sampling import build_queue, elapsed_ms, resolve_now, resolve_rng, shuffled
from geoarena.game.stats import average, percent
from geoarena.game.streak import clamp_score, next_streak, streak_multiplier
from geoarena.game.timed import COUNTDOWN_SECONDS
from geoarena.game.types import Continent, CountdownPhase, Difficulty, PlayingPhase
from geoarena.geo.data import GeoData

logger = structlog.get_logger("geoarena.game.map_quiz")


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> MapQuizState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = MAP_QUIZ_CONFIGS[difficulty]
    resolved_rng = resolve_rng(rng)

    pool = geo.catalog.pool(continent=continent, difficulty=difficulty)
    if not pool:
        logger.info("map_quiz_pool_relaxed", continent=continent.value, difficulty=difficulty.value)
        pool = geo.catalog.pool(continent=continent)
    queue = build_queue(lambda: shuffled(pool, resolved_rng))

    logger.debug(
        "map_quiz_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        pool_size=len(pool),
    )
    return MapQuizState(
        phase=CountdownPhase(countdown_left=COUNTDOWN_SECONDS),
        difficulty=difficulty,
        continent=continent,
        country_queue=queue,
        current_index=0,
        attempts=(),
        score=0,
        streak=0,
        best_streak=0,
        total_duration=config.total_time,
    )


def current_multiplier(state: MapQuizState) -> int:
    config = MAP_QUIZ_CONFIGS[state.difficulty]
    return streak_multiplier(
        state.streak,
        step=config.streak_multiplier_step,
        max_multiplier=config.max_multiplier,
    )


def submit_click(
    state: MapQuizState,
    clicked_code: str,
    *,
    now_utc: datetime | None = None,
) -> tuple[MapQuizState, MapClickResult]:
    """Evaluate a clicked country code against the current target.

    A wrong click keeps the same target on screen; only a correct click
    advances the queue.
    """
    phase = state.phase
    target = state.current_target
    if not isinstance(phase, PlayingPhase) or target is None:
        return state, MapClickResult.WRONG

    config = MAP_QUIZ_CONFIGS[state.difficulty]
    now = resolve_now(now_utc)
    is_correct = clicked_code == target
    attempt = MapQuizAttempt(
        target_code=target,
        clicked_code=clicked_code,
        correct=is_correct,
        time_ms=elapsed_ms(phase.shown_at, now),
    )
    streak, best_streak = next_streak(state.streak, state.best_streak, is_correct=is_correct)

    if not is_correct:
        return (
            replace(
                state,
                attempts=(*state.attempts, attempt),
                score=clamp_score(state.score - config.wrong_penalty),
                streak=streak,
            ),
            MapClickResult.WRONG,
        )

    return (
        replace(
            state,
            phase=replace(phase, shown_at=now),
            current_index=state.current_index + 1,
            attempts=(*state.attempts, attempt),
            score=state.score + config.base_points * current_multiplier(state),
            streak=streak,
            best_streak=best_streak,
        ),
        MapClickResult.CORRECT,
    )


def skip_country(state: MapQuizState, *, now_utc: datetime | None = None) -> MapQuizState:
    phase = state.phase
    target = state.current_target
    if not isinstance(phase, PlayingPhase) or target is None:
        return state

    config = MAP_QUIZ_CONFIGS[state.difficulty]
    now = resolve_now(now_utc)
    attempt = MapQuizAttempt(
        target_code=target,
        clicked_code=None,
        correct=False,
        time_ms=elapsed_ms(phase.shown_at, now),
    )
    return replace(
        state,
        phase=replace(phase, shown_at=now),
        current_index=state.current_index + 1,
        attempts=(*state.attempts, attempt),
        score=clamp_score(state.score - config.skip_penalty),
        streak=0,
    )


def map_quiz_stats(state: MapQuizState) -> MapQuizStats:
    correct = sum(1 for attempt in state.attempts if attempt.correct)
    skipped = sum(1 for attempt in state.attempts if attempt.clicked_code is None)
    total = len(state.attempts)
    return MapQuizStats(
        score=state.score,
        correct=correct,
        wrong=total - correct - skipped,
        skipped=skipped,
        total=total,
        best_streak=state.best_streak,
        avg_time_ms=average(attempt.time_ms for attempt in state.attempts),
        accuracy=percent(correct, total),
    )
