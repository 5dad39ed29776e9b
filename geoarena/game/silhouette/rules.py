from __future__ import annotations

import random
from dataclasses import replace

import structlog

from geoarena.game.sampling import resolve_rng, shuffled
from geoarena.game.silhouette.constants import (
    MAX_NEIGHBOR_HINTS,
    MIN_SOLVE_POINTS,
    SILHOUETTE_CONFIGS,
    TINY_SILHOUETTE_CODES,
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
from geoarena.game.stats import percent
from geoarena.game.types import Continent, Difficulty
from geoarena.geo.data import GeoData

logger = structlog.get_logger("geoarena.game.silhouette")


def _country_pool(
    geo: GeoData,
    *,
    continent: Continent,
    difficulty: Difficulty,
    exclude: tuple[str, ...] = (),
) -> list[str]:
    return geo.catalog.pool(
        continent=continent,
        difficulty=difficulty,
        exclude=(*TINY_SILHOUETTE_CODES, *exclude),
    )


def build_hints(code: str, *, geo: GeoData) -> tuple[SilhouetteHint, ...]:
    """Progressive hints in reveal order; the neighbors hint is omitted for island nations."""
    country = geo.catalog.get(code)
    if country is None:
        return ()

    hints = [
        SilhouetteHint(type=HintType.CONTINENT, value=country.continent),
        SilhouetteHint(type=HintType.FIRST_LETTER, value=country.name[0].upper()),
        SilhouetteHint(type=HintType.CAPITAL, value=code),
    ]
    neighbors = geo.graph.neighbors(code)
    if neighbors:
        hints.append(
            SilhouetteHint(type=HintType.NEIGHBORS, value=",".join(neighbors[:MAX_NEIGHBOR_HINTS]))
        )
    return tuple(hints)


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> SilhouetteState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = SILHOUETTE_CONFIGS[difficulty]
    resolved_rng = resolve_rng(rng)

    pool = _country_pool(geo, continent=continent, difficulty=difficulty)
    selected = shuffled(pool, resolved_rng)[: config.total_rounds]

    if len(selected) < config.total_rounds:
        padding_pool = _country_pool(
            geo,
            continent=Continent.ALL,
            difficulty=difficulty,
            exclude=tuple(selected),
        )
        missing = config.total_rounds - len(selected)
        selected.extend(shuffled(padding_pool, resolved_rng)[:missing])
        logger.info(
            "silhouette_pool_padded",
            continent=continent.value,
            difficulty=difficulty.value,
            padded=missing,
        )

    rounds = tuple(
        SilhouetteRound(
            country_code=code,
            guesses=(),
            hints_revealed=(),
            hints_available=build_hints(code, geo=geo),
        )
        for code in selected
    )

    logger.debug(
        "silhouette_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        rounds=len(rounds),
    )
    return SilhouetteState(
        phase=RoundPlayingPhase(time_left=config.round_time),
        difficulty=difficulty,
        continent=continent,
        rounds=rounds,
        current_round=0,
        total_score=0,
        round_duration=config.round_time,
    )


def _replace_round(state: SilhouetteState, round_: SilhouetteRound) -> tuple[SilhouetteRound, ...]:
    rounds = list(state.rounds)
    rounds[state.current_round] = round_
    return tuple(rounds)


def submit_guess(
    state: SilhouetteState,
    text: str,
    *,
    geo: GeoData,
    locale: str | None = None,
) -> tuple[SilhouetteState, SilhouetteGuessResult]:
    if not isinstance(state.phase, RoundPlayingPhase):
        return state, SilhouetteGuessResult.INVALID

    code = geo.names.resolve_country(text, locale)
    if code is None:
        return state, SilhouetteGuessResult.INVALID

    round_ = state.rounds[state.current_round]

    if code == round_.country_code:
        config = SILHOUETTE_CONFIGS[state.difficulty]
        penalty = (
            len(round_.guesses) * config.guess_penalty
            + len(round_.hints_revealed) * config.hint_penalty
        )
        points = max(config.max_points - penalty, MIN_SOLVE_POINTS)
        solved = replace(round_, solved=True, points=points)
        updated = replace(
            state,
            phase=RoundResultPhase(),
            rounds=_replace_round(state, solved),
            total_score=state.total_score + points,
        )
        return updated, SilhouetteGuessResult.CORRECT

    if code in round_.guesses:
        return state, SilhouetteGuessResult.WRONG

    missed = replace(round_, guesses=(*round_.guesses, code))
    return replace(state, rounds=_replace_round(state, missed)), SilhouetteGuessResult.WRONG


def reveal_hint(state: SilhouetteState) -> tuple[SilhouetteState, SilhouetteHint | None]:
    """Reveal the next hint in order; once all are shown the state comes back unchanged."""
    if not isinstance(state.phase, RoundPlayingPhase):
        return state, None

    round_ = state.rounds[state.current_round]
    next_index = len(round_.hints_revealed)
    if next_index >= len(round_.hints_available):
        return state, None

    hint = round_.hints_available[next_index]
    revealed = replace(round_, hints_revealed=(*round_.hints_revealed, hint))
    return replace(state, rounds=_replace_round(state, revealed)), hint


def skip_round(state: SilhouetteState) -> SilhouetteState:
    if not isinstance(state.phase, RoundPlayingPhase):
        return state

    skipped = replace(state.rounds[state.current_round], skipped=True, points=0)
    return replace(state, phase=RoundResultPhase(), rounds=_replace_round(state, skipped))


def handle_round_timeout(state: SilhouetteState) -> SilhouetteState:
    return skip_round(state)


def tick_round(state: SilhouetteState) -> SilhouetteState:
    phase = state.phase
    if not isinstance(phase, RoundPlayingPhase):
        return state
    time_left = phase.time_left - 1
    if time_left <= 0:
        return handle_round_timeout(state)
    return replace(state, phase=RoundPlayingPhase(time_left=time_left))


def next_round(state: SilhouetteState) -> SilhouetteState:
    if not isinstance(state.phase, RoundResultPhase):
        return state

    following = state.current_round + 1
    if following >= state.total_rounds:
        return replace(state, phase=SilhouetteResolutionPhase())
    return replace(
        state,
        phase=RoundPlayingPhase(time_left=state.round_duration),
        current_round=following,
    )


def silhouette_stats(state: SilhouetteState) -> SilhouetteStats:
    config = SILHOUETTE_CONFIGS[state.difficulty]
    max_possible = state.total_rounds * config.max_points
    return SilhouetteStats(
        total_score=state.total_score,
        max_possible=max_possible,
        percentage=percent(state.total_score, max_possible),
        solved=sum(1 for round_ in state.rounds if round_.solved),
        skipped=sum(1 for round_ in state.rounds if round_.skipped),
        total_rounds=state.total_rounds,
        total_hints=sum(len(round_.hints_revealed) for round_ in state.rounds),
        total_wrong=sum(len(round_.guesses) for round_ in state.rounds),
    )
