from __future__ import annotations

import random
from dataclasses import replace

import pytest
from structlog.testing import capture_logs

from geoarena.game import silhouette
from geoarena.game.silhouette import (
    HintType,
    RoundPlayingPhase,
    RoundResultPhase,
    SilhouetteGuessResult,
    SilhouetteHint,
    SilhouetteResolutionPhase,
    SilhouetteRound,
)
from geoarena.game.silhouette.constants import TINY_SILHOUETTE_CODES
from geoarena.game.types import Continent, Difficulty
from geoarena.geo.data import GeoData


def game_with_rounds(geo: GeoData, *codes: str, difficulty: Difficulty = Difficulty.EASY) -> silhouette.SilhouetteState:
    state = silhouette.create_game(geo, difficulty=difficulty, rng=random.Random(41))
    rounds = tuple(
        SilhouetteRound(
            country_code=code,
            guesses=(),
            hints_revealed=(),
            hints_available=silhouette.build_hints(code, geo=geo),
        )
        for code in codes
    )
    return replace(state, rounds=rounds)


@pytest.mark.parametrize(
    ("difficulty", "rounds", "round_time"),
    [
        (Difficulty.EASY, 5, 30),
        (Difficulty.MEDIUM, 8, 20),
        (Difficulty.HARD, 10, 15),
    ],
)
def test_create_game_excludes_tiny_countries(
    geo: GeoData,
    difficulty: Difficulty,
    rounds: int,
    round_time: int,
) -> None:
    state = silhouette.create_game(geo, difficulty=difficulty, rng=random.Random(3))
    codes = [round_.country_code for round_ in state.rounds]

    assert state.total_rounds == rounds
    assert state.phase == RoundPlayingPhase(time_left=round_time)
    assert len(set(codes)) == rounds
    assert not set(codes) & TINY_SILHOUETTE_CODES


def test_create_game_pads_from_all_continents(geo: GeoData) -> None:
    north_america = [
        code
        for code in geo.catalog.pool(continent=Continent.NORTH_AMERICA, difficulty=Difficulty.EASY)
        if code not in TINY_SILHOUETTE_CODES
    ]
    assert len(north_america) < 5

    with capture_logs() as logs:
        state = silhouette.create_game(
            geo,
            difficulty=Difficulty.EASY,
            continent=Continent.NORTH_AMERICA,
            rng=random.Random(6),
        )

    codes = [round_.country_code for round_ in state.rounds]
    assert state.total_rounds == 5
    assert len(set(codes)) == 5
    assert set(north_america) <= set(codes)
    continents = {geo.catalog.continent_of(code) for code in codes}
    assert "North America" in continents
    assert len(continents) > 1
    assert any(entry["event"] == "silhouette_pool_padded" for entry in logs)


def test_hints_follow_fixed_order(geo: GeoData) -> None:
    hints = silhouette.build_hints("DE", geo=geo)

    assert hints == (
        SilhouetteHint(type=HintType.CONTINENT, value="Europe"),
        SilhouetteHint(type=HintType.FIRST_LETTER, value="G"),
        SilhouetteHint(type=HintType.CAPITAL, value="DE"),
        SilhouetteHint(type=HintType.NEIGHBORS, value="DK,PL,CZ"),
    )


def test_island_gets_no_neighbor_hint(geo: GeoData) -> None:
    hints = silhouette.build_hints("JP", geo=geo)

    assert [hint.type for hint in hints] == [HintType.CONTINENT, HintType.FIRST_LETTER, HintType.CAPITAL]


def test_hint_exhaustion_returns_unchanged_state(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", "FR")

    for _ in range(4):
        state, hint = silhouette.reveal_hint(state)
        assert hint is not None

    assert len(state.rounds[0].hints_revealed) == 4
    exhausted, hint = silhouette.reveal_hint(state)
    assert hint is None
    assert exhausted is state


def test_correct_guess_points_account_for_guesses_and_hints(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", "FR")
    state, _ = silhouette.reveal_hint(state)
    state, first = silhouette.submit_guess(state, "Austria", geo=geo)
    state, repeat = silhouette.submit_guess(state, "austria", geo=geo)

    state, result = silhouette.submit_guess(state, "Germany", geo=geo)

    assert (first, repeat, result) == (
        SilhouetteGuessResult.WRONG,
        SilhouetteGuessResult.WRONG,
        SilhouetteGuessResult.CORRECT,
    )
    assert state.rounds[0].guesses == ("AT",)
    assert state.rounds[0].solved is True
    assert state.rounds[0].points == 100 - 10 - 15
    assert state.total_score == 75
    assert isinstance(state.phase, RoundResultPhase)


def test_solve_points_never_drop_below_floor(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", difficulty=Difficulty.HARD)
    for _ in range(4):
        state, _ = silhouette.reveal_hint(state)
    for name in ("Austria", "France", "Poland"):
        state, _ = silhouette.submit_guess(state, name, geo=geo)

    state, result = silhouette.submit_guess(state, "DE", geo=geo)

    assert result is SilhouetteGuessResult.CORRECT
    assert state.rounds[0].points == 10


def test_invalid_guess_is_not_recorded(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE")

    updated, result = silhouette.submit_guess(state, "Atlantis", geo=geo)

    assert result is SilhouetteGuessResult.INVALID
    assert updated is state


def test_round_timeout_is_a_skip(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", "FR")

    for _ in range(state.round_duration):
        state = silhouette.tick_round(state)

    assert isinstance(state.phase, RoundResultPhase)
    assert state.rounds[0].skipped is True
    assert state.rounds[0].points == 0
    assert silhouette.tick_round(state) is state


def test_next_round_resets_timer_and_finishes_after_last(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", "FR")
    state = silhouette.tick_round(state)
    state = silhouette.skip_round(state)

    state = silhouette.next_round(state)
    assert state.current_round == 1
    assert state.phase == RoundPlayingPhase(time_left=state.round_duration)
    assert silhouette.next_round(state) is state

    state, _ = silhouette.submit_guess(state, "France", geo=geo)
    state = silhouette.next_round(state)
    assert isinstance(state.phase, SilhouetteResolutionPhase)
    assert state.current_round == 1


def test_stats_summarize_rounds(geo: GeoData) -> None:
    state = game_with_rounds(geo, "DE", "FR")
    state, _ = silhouette.reveal_hint(state)
    state, _ = silhouette.submit_guess(state, "Spain", geo=geo)
    state, _ = silhouette.submit_guess(state, "Germany", geo=geo)
    state = silhouette.skip_round(silhouette.next_round(state))

    stats = silhouette.silhouette_stats(state)

    assert stats == silhouette.silhouette_stats(state)
    assert stats == silhouette.SilhouetteStats(
        total_score=75,
        max_possible=200,
        percentage=38,
        solved=1,
        skipped=1,
        total_rounds=2,
        total_hints=1,
        total_wrong=1,
    )
