from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import structlog

from geoarena.game.flags.constants import FLAG_CDN_URL, FLAG_SPRINT_CONFIGS
from geoarena.game.flags.types import FlagAttempt, FlagGuessResult, FlagSprintState, FlagSprintStats
from geoarena.game.sampling import build_queue, elapsed_ms, resolve_now, resolve_rng, shuffled
from geoarena.game.stats import average, percent
from geoarena.game.streak import clamp_score, next_streak, streak_multiplier
from geoarena.game.timed import COUNTDOWN_SECONDS
from geoarena.game.types import Continent, CountdownPhase, Difficulty, PlayingPhase
from geoarena.geo.data import GeoData

logger = structlog.get_logger("geoarena.game.flags")


def flag_url(code: str, width: int = 320) -> str:
    return FLAG_CDN_URL.format(width=width, code=code.lower())


def _country_pool(geo: GeoData, *, continent: Continent, difficulty: Difficulty) -> list[str]:
    pool = geo.catalog.pool(continent=continent, difficulty=difficulty)
    if pool:
        return pool
    logger.info("flag_sprint_pool_relaxed", continent=continent.value, difficulty=difficulty.value)
    return geo.catalog.pool(continent=continent)


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> FlagSprintState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = FLAG_SPRINT_CONFIGS[difficulty]
    resolved_rng = resolve_rng(rng)
    pool = _country_pool(geo, continent=continent, difficulty=difficulty)
    queue = build_queue(lambda: shuffled(pool, resolved_rng))

    logger.debug(
        "flag_sprint_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        pool_size=len(pool),
        queue_size=len(queue),
    )
    return FlagSprintState(
        phase=CountdownPhase(countdown_left=COUNTDOWN_SECONDS),
        difficulty=difficulty,
        continent=continent,
        flag_queue=queue,
        current_index=0,
        attempts=(),
        score=0,
        streak=0,
        best_streak=0,
        total_duration=config.total_time,
    )


def current_multiplier(state: FlagSprintState) -> int:
    config = FLAG_SPRINT_CONFIGS[state.difficulty]
    return streak_multiplier(
        state.streak,
        step=config.streak_multiplier_step,
        max_multiplier=config.max_multiplier,
    )


def submit_guess(
    state: FlagSprintState,
    text: str,
    *,
    geo: GeoData,
    locale: str | None = None,
    now_utc: datetime | None = None,
) -> tuple[FlagSprintState, FlagGuessResult]:
    phase = state.phase
    current_flag = state.current_flag
    if not isinstance(phase, PlayingPhase) or current_flag is None:
        return state, FlagGuessResult.INVALID

    code = geo.names.resolve_country(text, locale)
    if code is None:
        return state, FlagGuessResult.INVALID

    config = FLAG_SPRINT_CONFIGS[state.difficulty]
    now = resolve_now(now_utc)
    is_correct = code == current_flag
    attempt = FlagAttempt(
        country_code=current_flag,
        correct=is_correct,
        time_ms=elapsed_ms(phase.shown_at, now),
    )
    streak, best_streak = next_streak(state.streak, state.best_streak, is_correct=is_correct)

    if is_correct:
        score = state.score + config.base_points * current_multiplier(state)
    else:
        score = clamp_score(state.score - config.wrong_penalty)

    updated = replace(
        state,
        phase=replace(phase, shown_at=now),
        current_index=state.current_index + 1,
        attempts=(*state.attempts, attempt),
        score=score,
        streak=streak,
        best_streak=best_streak,
    )
    return updated, FlagGuessResult.CORRECT if is_correct else FlagGuessResult.WRONG


def skip_flag(state: FlagSprintState, *, now_utc: datetime | None = None) -> FlagSprintState:
    phase = state.phase
    current_flag = state.current_flag
    if not isinstance(phase, PlayingPhase) or current_flag is None:
        return state

    config = FLAG_SPRINT_CONFIGS[state.difficulty]
    now = resolve_now(now_utc)
    attempt = FlagAttempt(
        country_code=current_flag,
        correct=False,
        time_ms=elapsed_ms(phase.shown_at, now),
        skipped=True,
    )
    return replace(
        state,
        phase=replace(phase, shown_at=now),
        current_index=state.current_index + 1,
        attempts=(*state.attempts, attempt),
        score=clamp_score(state.score - config.skip_penalty),
        streak=0,
    )


def flag_sprint_stats(state: FlagSprintState) -> FlagSprintStats:
    correct = sum(1 for attempt in state.attempts if attempt.correct)
    total = len(state.attempts)
    return FlagSprintStats(
        score=state.score,
        correct=correct,
        wrong=total - correct,
        total=total,
        best_streak=state.best_streak,
        avg_time_ms=average(attempt.time_ms for attempt in state.attempts),
        accuracy=percent(correct, total),
    )
