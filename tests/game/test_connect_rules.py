from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

import pytest
from structlog.testing import capture_logs

from geoarena.game import connect
from geoarena.game.connect import ConnectResolutionPhase, ExecutionPhase, MoveResult, RevealPhase
from geoarena.game.connect.constants import CONNECT_CONFIGS
from geoarena.game.types import Continent, Difficulty, PhaseKind
from geoarena.geo.catalog import CountryCatalog
from geoarena.geo.data import GeoData
from geoarena.geo.graph import CountryGraph
from geoarena.geo.names import CatalogNameResolver
from geoarena.geo.types import Country

UTC = timezone.utc
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def route_game(
    geo: GeoData,
    start: str,
    end: str,
    *,
    difficulty: Difficulty = Difficulty.HARD,
) -> connect.ConnectGameState:
    """A game in execution phase on a chosen route."""
    state = connect.create_game(geo, difficulty=difficulty, rng=random.Random(31))
    optimal_path = geo.graph.shortest_path(start, end)
    assert optimal_path is not None
    state = replace(
        state,
        start_code=start,
        end_code=end,
        optimal_path=tuple(optimal_path),
        player_path=(start,),
        current_position=start,
    )
    return connect.start_execution(state)


def test_create_game_starts_in_reveal_with_route_in_range(geo: GeoData) -> None:
    for seed in range(5):
        state = connect.create_game(geo, difficulty=Difficulty.MEDIUM, continent=Continent.EUROPE, rng=random.Random(seed))
        config = CONNECT_CONFIGS[Difficulty.MEDIUM]

        assert state.phase == RevealPhase(time_left=5)
        assert state.player_path == (state.start_code,)
        assert state.optimal_path[0] == state.start_code
        assert state.optimal_path[-1] == state.end_code
        assert config.min_path_length <= len(state.optimal_path) - 1 <= config.max_path_length
        assert geo.catalog.continent_of(state.start_code) == "Europe"
        assert geo.catalog.continent_of(state.end_code) == "Europe"


def test_reveal_ticks_into_execution(geo: GeoData) -> None:
    state = connect.create_game(geo, difficulty=Difficulty.EASY, rng=random.Random(1))

    for _ in range(4):
        state = connect.tick_reveal(state)
    assert state.phase == RevealPhase(time_left=1)

    state = connect.tick_reveal(state)
    assert state.phase == ExecutionPhase(execution_time_left=90, move_time_left=8)
    assert state.phase.kind is PhaseKind.EXECUTION


def test_portugal_to_greece_win(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")

    for code in ("ES", "FR", "IT", "SI", "HR", "RS"):
        state, result = connect.submit_move(state, code, geo=geo, now_utc=NOW)
        assert result is MoveResult.CORRECT
        assert isinstance(state.phase, ExecutionPhase)

    state, result = connect.submit_move(state, "North Macedonia", geo=geo, now_utc=NOW)

    assert result is MoveResult.CORRECT
    assert state.phase == ConnectResolutionPhase(is_complete=True, is_timeout=False)
    assert state.is_complete is True
    assert state.player_path == ("PT", "ES", "FR", "IT", "SI", "HR", "RS", "MK")
    assert state.score == 7 + 3 * state.wrong_attempts + 2 * state.hints_used
    assert state.score == 7
    stats = connect.connect_stats(state)
    assert stats.rating.label == "PERFECT"
    assert stats.breakdown.optimal_moves == 7
    assert stats.breakdown.efficiency == 100


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Greece", MoveResult.DESTINATION_COUNTRY),
        ("Portugal", MoveResult.ALREADY_VISITED),
        ("Italy", MoveResult.NOT_NEIGHBOR),
    ],
)
def test_rejected_moves_are_penalized_and_recorded(geo: GeoData, text: str, expected: MoveResult) -> None:
    state = route_game(geo, "PT", "GR")

    state, result = connect.submit_move(state, text, geo=geo, now_utc=NOW)

    assert result is expected
    assert state.wrong_attempts == 1
    assert state.consecutive_wrong_attempts == 1
    assert state.score == 3
    assert state.moves[-1] == connect.GameMove(
        country_code=geo.names.resolve_country(text),
        result=expected,
        timestamp=NOW,
    )
    assert state.current_position == "PT"


def test_unresolvable_move_changes_nothing(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")

    updated, result = connect.submit_move(state, "Atlantis", geo=geo, now_utc=NOW)

    assert result is MoveResult.INVALID_COUNTRY
    assert updated is state


def test_correct_move_resets_move_timer_and_consecutive(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")
    state, _ = connect.submit_move(state, "Italy", geo=geo, now_utc=NOW)
    state = connect.tick_move(connect.tick_move(state))
    assert isinstance(state.phase, ExecutionPhase)
    assert state.phase.move_time_left == 2

    state, result = connect.submit_move(state, "Spain", geo=geo, now_utc=NOW)

    assert result is MoveResult.CORRECT
    assert state.consecutive_wrong_attempts == 0
    assert state.phase.move_time_left == 4
    assert state.score == 1 + 3


def test_hint_gives_next_step_and_costs_two(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")

    state, hint = connect.use_hint(state, geo=geo)

    assert hint == "ES"
    assert state.hints_used == 1
    assert state.score == 2


def test_no_hint_when_path_to_destination_is_one_hop(geo: GeoData) -> None:
    state = route_game(geo, "ES", "AD")
    state = replace(state, end_code="DE", current_position="FR")

    updated, hint = connect.use_hint(state, geo=geo)

    assert hint is None
    assert updated is state


def test_execution_timeout_ends_game_with_penalty(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")
    state, _ = connect.submit_move(state, "Spain", geo=geo, now_utc=NOW)

    for _ in range(CONNECT_CONFIGS[Difficulty.HARD].execution_time):
        state = connect.tick_execution(state)

    assert state.phase == ConnectResolutionPhase(is_complete=False, is_timeout=True)
    assert state.score == 1 + 5
    assert connect.submit_move(state, "France", geo=geo)[1] is MoveResult.INVALID_COUNTRY


def test_move_timeout_counts_as_wrong_attempt(geo: GeoData) -> None:
    state = route_game(geo, "PT", "GR")

    for _ in range(CONNECT_CONFIGS[Difficulty.HARD].move_time):
        state = connect.tick_move(state)

    assert isinstance(state.phase, ExecutionPhase)
    assert state.phase.move_time_left == CONNECT_CONFIGS[Difficulty.HARD].move_time
    assert state.wrong_attempts == 1
    assert state.consecutive_wrong_attempts == 0
    assert state.score == 3


def test_skip_is_gated_and_keeps_settings(geo: GeoData) -> None:
    state = replace(route_game(geo, "PT", "GR", difficulty=Difficulty.EASY), continent=Continent.AFRICA)
    state, _ = connect.submit_move(state, "Italy", geo=geo, now_utc=NOW)
    assert connect.can_skip(state) is False
    assert connect.skip_route(state, geo=geo) is state

    state, _ = connect.submit_move(state, "Portugal", geo=geo, now_utc=NOW)
    skipped = connect.skip_route(state, geo=geo, rng=random.Random(4))

    assert skipped.difficulty is Difficulty.EASY
    assert skipped.continent is Continent.AFRICA
    assert isinstance(skipped.phase, RevealPhase)
    assert skipped.wrong_attempts == 0
    assert geo.catalog.continent_of(skipped.start_code) == "Africa"


@pytest.mark.parametrize(
    ("score", "optimal", "label"),
    [
        (5, 5, "PERFECT"),
        (7, 5, "GREAT"),
        (12, 5, "GOOD"),
        (20, 5, "OK"),
        (21, 5, "KEEP TRYING"),
        (1, 0, "PERFECT"),
    ],
)
def test_rating_buckets(score: int, optimal: int, label: str) -> None:
    assert connect.rating(score, optimal).label == label


def test_score_breakdown_matches_formula(geo: GeoData) -> None:
    state = replace(
        route_game(geo, "PT", "GR"),
        player_path=("PT", "ES", "FR"),
        wrong_attempts=2,
        hints_used=1,
    )

    breakdown = connect.score_breakdown(state)

    assert breakdown == connect.ScoreBreakdown(
        moves=2,
        wrong_penalty=6,
        hint_penalty=2,
        timeout_penalty=0,
        total=10,
        optimal_moves=7,
        efficiency=70,
    )
    assert connect.calculate_score(state) == 10


def test_route_falls_back_when_no_candidates_exist() -> None:
    countries = [
        Country("PT", "Portugal", "Lisbon", "Europe", (0.0, 0.0)),
        Country("ES", "Spain", "Madrid", "Europe", (0.0, 1.0)),
        Country("GR", "Greece", "Athens", "Europe", (0.0, 9.0)),
    ]
    catalog = CountryCatalog(countries, {})
    graph = CountryGraph({"PT": ("ES",), "ES": ("PT",)}, known_codes=catalog.codes)
    tiny = GeoData(catalog=catalog, graph=graph, names=CatalogNameResolver(catalog))

    with capture_logs() as logs:
        start, end, path = connect.find_route(tiny, difficulty=Difficulty.HARD, continent=Continent.EUROPE)

    assert (start, end) == ("PT", "GR")
    assert path == ("PT", "GR")
    assert logs[-1]["event"] == "connect_route_fallback_used"
