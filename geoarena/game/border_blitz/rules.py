from __future__ import annotations

import random
from dataclasses import replace

import structlog

from geoarena.game.border_blitz.constants import (
    BORDER_BLITZ_CONFIGS,
    FALLBACK_ANCHOR,
    RELAXED_NEIGHBOR_RANGE,
    SKIP_UNLOCK_WRONG_ATTEMPTS,
)
from geoarena.game.border_blitz.types import (
    BlitzGuess,
    BlitzGuessResult,
    BorderBlitzState,
    BorderBlitzStats,
)
from geoarena.game.sampling import resolve_rng
from geoarena.game.stats import percent
from geoarena.game.streak import clamp_score
from geoarena.game.timed import COUNTDOWN_SECONDS
from geoarena.game.types import (
    Continent,
    CountdownPhase,
    Difficulty,
    PlayingPhase,
    ResolutionPhase,
    TimedPhase,
)
from geoarena.geo.data import GeoData

logger = structlog.get_logger("geoarena.game.border_blitz")


def _anchor_pool(
    geo: GeoData,
    *,
    continent: Continent,
    difficulty: Difficulty,
    neighbor_range: tuple[int, int],
    exclude: str | None,
) -> list[str]:
    min_neighbors, max_neighbors = neighbor_range
    return [
        code
        for code in geo.catalog.pool(continent=continent, difficulty=difficulty)
        if code != exclude and min_neighbors <= len(geo.graph.neighbors(code)) <= max_neighbors
    ]


def pick_anchor(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    exclude: str | None = None,
    rng: random.Random | None = None,
) -> str:
    """Random anchor in the difficulty's neighbor-count range.

    Small continent filters can leave that pool empty, so the neighbor range
    is relaxed first, then the tier ceiling, then both.
    """
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = BORDER_BLITZ_CONFIGS[difficulty]
    exact_range = (config.min_neighbors, config.max_neighbors)
    attempts = (
        (difficulty, exact_range),
        (difficulty, RELAXED_NEIGHBOR_RANGE),
        (Difficulty.HARD, exact_range),
        (Difficulty.HARD, RELAXED_NEIGHBOR_RANGE),
    )

    for level, (pool_difficulty, neighbor_range) in enumerate(attempts):
        pool = _anchor_pool(
            geo,
            continent=continent,
            difficulty=pool_difficulty,
            neighbor_range=neighbor_range,
            exclude=exclude,
        )
        if pool:
            if level > 0:
                logger.info(
                    "border_blitz_anchor_pool_relaxed",
                    continent=continent.value,
                    difficulty=difficulty.value,
                    relax_level=level,
                )
            return resolve_rng(rng).choice(pool)

    logger.warning("border_blitz_anchor_fallback_used", continent=continent.value, exclude=exclude)
    return FALLBACK_ANCHOR


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> BorderBlitzState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = BORDER_BLITZ_CONFIGS[difficulty]
    anchor_code = pick_anchor(geo, difficulty=difficulty, continent=continent, rng=rng)

    logger.debug(
        "border_blitz_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        anchor=anchor_code,
    )
    return BorderBlitzState(
        phase=CountdownPhase(countdown_left=COUNTDOWN_SECONDS),
        difficulty=difficulty,
        continent=continent,
        anchor_code=anchor_code,
        found_neighbors=(),
        hinted_neighbors=(),
        guesses=(),
        wrong_attempts=0,
        consecutive_wrong_attempts=0,
        hints_used=0,
        skips_used=0,
        score=0,
        total_duration=config.total_time,
    )


def _record_miss(
    state: BorderBlitzState,
    *,
    code: str | None,
    result: BlitzGuessResult,
) -> BorderBlitzState:
    config = BORDER_BLITZ_CONFIGS[state.difficulty]
    return replace(
        state,
        guesses=(*state.guesses, BlitzGuess(anchor_code=state.anchor_code, country_code=code, result=result)),
        wrong_attempts=state.wrong_attempts + 1,
        consecutive_wrong_attempts=state.consecutive_wrong_attempts + 1,
        score=clamp_score(state.score - config.wrong_penalty),
    )


def _found_phase(
    state: BorderBlitzState,
    found: tuple[str, ...],
    neighbors: tuple[str, ...],
) -> TimedPhase:
    if len(found) == len(neighbors):
        return ResolutionPhase()
    return state.phase


def submit_guess(
    state: BorderBlitzState,
    text: str,
    *,
    geo: GeoData,
    locale: str | None = None,
) -> tuple[BorderBlitzState, BlitzGuessResult]:
    if not isinstance(state.phase, PlayingPhase):
        return state, BlitzGuessResult.WRONG

    code = geo.names.resolve_country(text, locale)
    if code is None:
        return _record_miss(state, code=None, result=BlitzGuessResult.INVALID), BlitzGuessResult.INVALID

    neighbors = geo.graph.neighbors(state.anchor_code)
    if code not in neighbors or code in state.found_neighbors:
        return _record_miss(state, code=code, result=BlitzGuessResult.WRONG), BlitzGuessResult.WRONG

    config = BORDER_BLITZ_CONFIGS[state.difficulty]
    found = (*state.found_neighbors, code)
    updated = replace(
        state,
        phase=_found_phase(state, found, neighbors),
        found_neighbors=found,
        guesses=(
            *state.guesses,
            BlitzGuess(anchor_code=state.anchor_code, country_code=code, result=BlitzGuessResult.CORRECT),
        ),
        consecutive_wrong_attempts=0,
        score=state.score + config.points_per_neighbor,
    )
    return updated, BlitzGuessResult.CORRECT


def use_hint(
    state: BorderBlitzState,
    *,
    geo: GeoData,
    rng: random.Random | None = None,
) -> tuple[BorderBlitzState, str | None]:
    """Reveal one random unfound neighbor at a score cost; no points are earned for it."""
    if not isinstance(state.phase, PlayingPhase):
        return state, None

    neighbors = geo.graph.neighbors(state.anchor_code)
    unfound = [code for code in neighbors if code not in state.found_neighbors]
    if not unfound:
        return state, None

    config = BORDER_BLITZ_CONFIGS[state.difficulty]
    hint_code = resolve_rng(rng).choice(unfound)
    found = (*state.found_neighbors, hint_code)
    updated = replace(
        state,
        phase=_found_phase(state, found, neighbors),
        found_neighbors=found,
        hinted_neighbors=(*state.hinted_neighbors, hint_code),
        hints_used=state.hints_used + 1,
        score=clamp_score(state.score - config.hint_penalty),
    )
    return updated, hint_code


def can_skip(state: BorderBlitzState) -> bool:
    return (
        isinstance(state.phase, PlayingPhase)
        and state.consecutive_wrong_attempts >= SKIP_UNLOCK_WRONG_ATTEMPTS
    )


def skip_anchor(
    state: BorderBlitzState,
    *,
    geo: GeoData,
    rng: random.Random | None = None,
) -> BorderBlitzState:
    """Swap in a fresh anchor; score, timer and cumulative counters carry over."""
    if not can_skip(state):
        return state

    anchor_code = pick_anchor(
        geo,
        difficulty=state.difficulty,
        continent=state.continent,
        exclude=state.anchor_code,
        rng=rng,
    )
    return replace(
        state,
        anchor_code=anchor_code,
        found_neighbors=(),
        hinted_neighbors=(),
        consecutive_wrong_attempts=0,
        skips_used=state.skips_used + 1,
    )


def border_blitz_stats(state: BorderBlitzState, *, geo: GeoData) -> BorderBlitzStats:
    total = len(geo.graph.neighbors(state.anchor_code))
    found = len(state.found_neighbors)
    correct = sum(1 for guess in state.guesses if guess.result is BlitzGuessResult.CORRECT)
    return BorderBlitzStats(
        score=state.score,
        found=found,
        total=total,
        all_found=found == total,
        wrong_attempts=state.wrong_attempts,
        hints_used=state.hints_used,
        skips_used=state.skips_used,
        accuracy=percent(correct, len(state.guesses)),
    )
