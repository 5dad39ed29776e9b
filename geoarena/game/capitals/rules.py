from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import structlog

from geoarena.game.capitals.constants import CAPITAL_CLASH_CONFIGS, MIN_PARTIAL_CAPITAL_LENGTH
from geoarena.game.capitals.types import (
    CapitalAttempt,
    CapitalClashState,
    CapitalClashStats,
    CapitalGuessResult,
    CapitalQuestion,
    QuestionDirection,
    QuestionDisplay,
)
from geoarena.game.sampling import build_queue, elapsed_ms, resolve_now, resolve_rng, shuffled
from geoarena.game.stats import average, percent
from geoarena.game.streak import clamp_score, next_streak, streak_multiplier
from geoarena.game.timed import COUNTDOWN_SECONDS
from geoarena.game.types import Continent, CountdownPhase, Difficulty, PlayingPhase
from geoarena.geo.data import GeoData
from geoarena.geo.names import NameResolver, normalize_answer

logger = structlog.get_logger("geoarena.game.capitals")


def _question_batch(
    pool: list[str],
    *,
    mix_directions: bool,
    rng: random.Random,
) -> list[CapitalQuestion]:
    questions: list[CapitalQuestion] = []
    for code in pool:
        if mix_directions and rng.random() > 0.5:
            direction = QuestionDirection.COUNTRY_TO_CAPITAL
        else:
            direction = QuestionDirection.CAPITAL_TO_COUNTRY
        questions.append(CapitalQuestion(country_code=code, direction=direction))
    return shuffled(questions, rng)


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> CapitalClashState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = CAPITAL_CLASH_CONFIGS[difficulty]
    resolved_rng = resolve_rng(rng)

    pool = geo.catalog.pool(continent=continent, difficulty=difficulty)
    if not pool:
        logger.info("capital_clash_pool_relaxed", continent=continent.value, difficulty=difficulty.value)
        pool = geo.catalog.pool(continent=continent)
    questions = build_queue(
        lambda: _question_batch(pool, mix_directions=config.mix_directions, rng=resolved_rng)
    )

    logger.debug(
        "capital_clash_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        pool_size=len(pool),
        mix_directions=config.mix_directions,
    )
    return CapitalClashState(
        phase=CountdownPhase(countdown_left=COUNTDOWN_SECONDS),
        difficulty=difficulty,
        continent=continent,
        questions=questions,
        current_index=0,
        attempts=(),
        score=0,
        streak=0,
        best_streak=0,
        total_duration=config.total_time,
    )


def current_multiplier(state: CapitalClashState) -> int:
    config = CAPITAL_CLASH_CONFIGS[state.difficulty]
    return streak_multiplier(
        state.streak,
        step=config.streak_multiplier_step,
        max_multiplier=config.max_multiplier,
    )


def _matches_capital(expected: str, normalized_input: str) -> bool:
    normalized_expected = normalize_answer(expected)
    if not normalized_expected:
        return False
    if normalized_expected == normalized_input:
        return True
    return len(normalized_input) >= MIN_PARTIAL_CAPITAL_LENGTH and normalized_input in normalized_expected


def is_correct_answer(
    question: CapitalQuestion,
    text: str,
    *,
    names: NameResolver,
    locale: str | None = None,
) -> bool:
    """Capitals accept an exact or partial (4+ chars) match; countries need an exact or resolvable name."""
    normalized = normalize_answer(text)
    code = question.country_code

    if question.direction is QuestionDirection.COUNTRY_TO_CAPITAL:
        candidates = {names.capital_name(code)}
        if locale is not None:
            candidates.add(names.capital_name(code, locale))
        return any(_matches_capital(candidate, normalized) for candidate in candidates)

    if normalize_answer(names.country_name(code)) == normalized:
        return True
    return names.resolve_country(text, locale) == code


def submit_guess(
    state: CapitalClashState,
    text: str,
    *,
    geo: GeoData,
    locale: str | None = None,
    now_utc: datetime | None = None,
) -> tuple[CapitalClashState, CapitalGuessResult]:
    phase = state.phase
    question = state.current_question
    if not isinstance(phase, PlayingPhase) or question is None:
        return state, CapitalGuessResult.WRONG

    config = CAPITAL_CLASH_CONFIGS[state.difficulty]
    now = resolve_now(now_utc)
    is_correct = is_correct_answer(question, text, names=geo.names, locale=locale)
    attempt = CapitalAttempt(
        question=question,
        answer=text,
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
    return updated, CapitalGuessResult.CORRECT if is_correct else CapitalGuessResult.WRONG


def skip_question(state: CapitalClashState, *, now_utc: datetime | None = None) -> CapitalClashState:
    phase = state.phase
    question = state.current_question
    if not isinstance(phase, PlayingPhase) or question is None:
        return state

    now = resolve_now(now_utc)
    attempt = CapitalAttempt(
        question=question,
        answer="",
        correct=False,
        time_ms=elapsed_ms(phase.shown_at, now),
        skipped=True,
    )
    return replace(
        state,
        phase=replace(phase, shown_at=now),
        current_index=state.current_index + 1,
        attempts=(*state.attempts, attempt),
        streak=0,
    )


def question_display(
    question: CapitalQuestion,
    *,
    names: NameResolver,
    locale: str | None = None,
) -> QuestionDisplay:
    country = names.country_name(question.country_code, locale)
    capital = names.capital_name(question.country_code, locale)
    if question.direction is QuestionDirection.COUNTRY_TO_CAPITAL:
        return QuestionDisplay(prompt=country, answer=capital)
    return QuestionDisplay(prompt=capital, answer=country)


def capital_clash_stats(state: CapitalClashState) -> CapitalClashStats:
    correct = sum(1 for attempt in state.attempts if attempt.correct)
    skipped = sum(1 for attempt in state.attempts if attempt.skipped)
    total = len(state.attempts)
    return CapitalClashStats(
        score=state.score,
        correct=correct,
        wrong=total - correct,
        skipped=skipped,
        total=total,
        best_streak=state.best_streak,
        avg_time_ms=average(attempt.time_ms for attempt in state.attempts),
        accuracy=percent(correct, total),
    )
