from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime

import structlog

from geoarena.game.connect.constants import (
    CONNECT_CONFIGS,
    DEFAULT_FALLBACK_ROUTE,
    FALLBACK_ROUTES,
    MAX_ROUTE_ATTEMPTS,
    REVEAL_SECONDS,
    SKIP_UNLOCK_WRONG_ATTEMPTS,
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
)
from geoarena.game.sampling import resolve_now, resolve_rng
from geoarena.game.types import Continent, Difficulty
from geoarena.geo.data import GeoData

logger = structlog.get_logger("geoarena.game.connect")


def find_route(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> tuple[str, str, tuple[str, ...]]:
    """Pick start, end and the optimal path between them.

    Samples a start inside the continent filter, then an end at a random
    target distance within the difficulty's hop range. After the retry
    attempts are spent without any route, a known-good pair is used.
    """
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = CONNECT_CONFIGS[difficulty]
    resolved_rng = resolve_rng(rng)
    accept = geo.continent_filter(continent)

    route: tuple[str, str, tuple[str, ...]] | None = None
    for _ in range(MAX_ROUTE_ATTEMPTS):
        start = geo.graph.random_connected(accept, rng=resolved_rng)
        target_distance = resolved_rng.randint(config.min_path_length, config.max_path_length)
        candidates = geo.graph.countries_at_distance(start, target_distance, accept)
        if not candidates:
            continue
        end = resolved_rng.choice(candidates)
        path = geo.graph.shortest_path(start, end)
        if path is None:
            continue
        # An out-of-range route is kept only until a better one turns up.
        route = (start, end, tuple(path))
        if config.min_path_length <= len(path) - 1 <= config.max_path_length:
            break

    if route is not None:
        return route

    start, end = FALLBACK_ROUTES.get(continent, DEFAULT_FALLBACK_ROUTE)
    path = geo.graph.shortest_path(start, end) or [start, end]
    logger.warning(
        "connect_route_fallback_used",
        continent=continent.value,
        difficulty=difficulty.value,
        start=start,
        end=end,
    )
    return start, end, tuple(path)


def create_game(
    geo: GeoData,
    *,
    difficulty: Difficulty,
    continent: Continent = Continent.ALL,
    rng: random.Random | None = None,
) -> ConnectGameState:
    difficulty = Difficulty(difficulty)
    continent = Continent(continent)
    config = CONNECT_CONFIGS[difficulty]
    start, end, optimal_path = find_route(geo, difficulty=difficulty, continent=continent, rng=rng)

    logger.debug(
        "connect_game_created",
        difficulty=difficulty.value,
        continent=continent.value,
        start=start,
        end=end,
        optimal_hops=len(optimal_path) - 1,
    )
    return ConnectGameState(
        phase=RevealPhase(time_left=REVEAL_SECONDS),
        difficulty=difficulty,
        continent=continent,
        start_code=start,
        end_code=end,
        optimal_path=optimal_path,
        player_path=(start,),
        moves=(),
        current_position=start,
        wrong_attempts=0,
        consecutive_wrong_attempts=0,
        hints_used=0,
        score=0,
        reveal_duration=REVEAL_SECONDS,
        execution_duration=config.execution_time,
        move_duration=config.move_time,
    )


def _rescored(state: ConnectGameState) -> ConnectGameState:
    return replace(state, score=calculate_score(state))


def start_execution(state: ConnectGameState) -> ConnectGameState:
    if not isinstance(state.phase, RevealPhase):
        return state
    return replace(
        state,
        phase=ExecutionPhase(
            execution_time_left=state.execution_duration,
            move_time_left=state.move_duration,
        ),
    )


def tick_reveal(state: ConnectGameState) -> ConnectGameState:
    phase = state.phase
    if not isinstance(phase, RevealPhase):
        return state
    time_left = phase.time_left - 1
    if time_left <= 0:
        return start_execution(state)
    return replace(state, phase=RevealPhase(time_left=time_left))


def _rejected(
    state: ConnectGameState,
    code: str,
    result: MoveResult,
    now: datetime,
) -> tuple[ConnectGameState, MoveResult]:
    updated = replace(
        state,
        moves=(*state.moves, GameMove(country_code=code, result=result, timestamp=now)),
        wrong_attempts=state.wrong_attempts + 1,
        consecutive_wrong_attempts=state.consecutive_wrong_attempts + 1,
    )
    return _rescored(updated), result


def submit_move(
    state: ConnectGameState,
    text: str,
    *,
    geo: GeoData,
    locale: str | None = None,
    now_utc: datetime | None = None,
) -> tuple[ConnectGameState, MoveResult]:
    """Validate one typed step of the route.

    The destination itself is never typed: reaching any neighbor of it
    completes the route.
    """
    phase = state.phase
    if not isinstance(phase, ExecutionPhase):
        return state, MoveResult.INVALID_COUNTRY

    code = geo.names.resolve_country(text, locale)
    if code is None or code not in geo.catalog:
        return state, MoveResult.INVALID_COUNTRY

    now = resolve_now(now_utc)
    if code == state.end_code:
        return _rejected(state, code, MoveResult.DESTINATION_COUNTRY, now)
    if code in state.player_path:
        return _rejected(state, code, MoveResult.ALREADY_VISITED, now)
    if not geo.graph.is_neighbor(state.current_position, code):
        return _rejected(state, code, MoveResult.NOT_NEIGHBOR, now)

    reached = geo.graph.is_neighbor(code, state.end_code)
    if reached:
        next_phase = ConnectResolutionPhase(is_complete=True, is_timeout=False)
    else:
        next_phase = replace(phase, move_time_left=state.move_duration)

    updated = replace(
        state,
        phase=next_phase,
        player_path=(*state.player_path, code),
        moves=(*state.moves, GameMove(country_code=code, result=MoveResult.CORRECT, timestamp=now)),
        current_position=code,
        consecutive_wrong_attempts=0,
    )
    return _rescored(updated), MoveResult.CORRECT


def use_hint(state: ConnectGameState, *, geo: GeoData) -> tuple[ConnectGameState, str | None]:
    """Reveal the next step of a shortest route from the current position."""
    if not isinstance(state.phase, ExecutionPhase):
        return state, None
    if geo.graph.is_neighbor(state.current_position, state.end_code):
        return state, None

    path = geo.graph.shortest_path(state.current_position, state.end_code)
    if path is None or len(path) < 3:
        return state, None

    return _rescored(replace(state, hints_used=state.hints_used + 1)), path[1]


def handle_timeout(state: ConnectGameState) -> ConnectGameState:
    if not isinstance(state.phase, ExecutionPhase):
        return state
    return _rescored(replace(state, phase=ConnectResolutionPhase(is_complete=False, is_timeout=True)))


def handle_move_timeout(state: ConnectGameState) -> ConnectGameState:
    phase = state.phase
    if not isinstance(phase, ExecutionPhase):
        return state
    updated = replace(
        state,
        phase=replace(phase, move_time_left=state.move_duration),
        wrong_attempts=state.wrong_attempts + 1,
    )
    return _rescored(updated)


def tick_execution(state: ConnectGameState) -> ConnectGameState:
    phase = state.phase
    if not isinstance(phase, ExecutionPhase):
        return state
    execution_time_left = phase.execution_time_left - 1
    if execution_time_left <= 0:
        return handle_timeout(state)
    return replace(state, phase=replace(phase, execution_time_left=execution_time_left))


def tick_move(state: ConnectGameState) -> ConnectGameState:
    phase = state.phase
    if not isinstance(phase, ExecutionPhase):
        return state
    move_time_left = phase.move_time_left - 1
    if move_time_left <= 0:
        return handle_move_timeout(state)
    return replace(state, phase=replace(phase, move_time_left=move_time_left))


def can_skip(state: ConnectGameState) -> bool:
    return (
        isinstance(state.phase, ExecutionPhase)
        and state.consecutive_wrong_attempts >= SKIP_UNLOCK_WRONG_ATTEMPTS
    )


def skip_route(
    state: ConnectGameState,
    *,
    geo: GeoData,
    rng: random.Random | None = None,
) -> ConnectGameState:
    """Replace a stuck route with a fresh one at the same difficulty and continent."""
    if not can_skip(state):
        return state
    logger.debug("connect_route_skipped", start=state.start_code, end=state.end_code)
    return create_game(geo, difficulty=state.difficulty, continent=state.continent, rng=rng)


def connect_stats(state: ConnectGameState) -> ConnectStats:
    breakdown = score_breakdown(state)
    return ConnectStats(
        breakdown=breakdown,
        rating=rating(breakdown.total, breakdown.optimal_moves),
        wrong_attempts=state.wrong_attempts,
        hints_used=state.hints_used,
        is_complete=state.is_complete,
        is_timeout=state.is_timeout,
    )
