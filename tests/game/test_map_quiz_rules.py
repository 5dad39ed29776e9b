from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

from geoarena.game import map_quiz
from geoarena.game.types import Continent, Difficulty
from geoarena.geo.data import GeoData

UTC = timezone.utc
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def playing_game(geo: GeoData, *, difficulty: Difficulty = Difficulty.MEDIUM) -> map_quiz.MapQuizState:
    state = map_quiz.create_game(geo, difficulty=difficulty, rng=random.Random(21))
    state = map_quiz.start_playing(state, now_utc=NOW)
    return replace(state, country_queue=("BR", "AR", "CL"))


def test_create_game_filters_continent(geo: GeoData) -> None:
    state = map_quiz.create_game(geo, difficulty="medium", continent=Continent.SOUTH_AMERICA, rng=random.Random(3))

    assert state.country_queue
    assert all(geo.catalog.continent_of(code) == "South America" for code in state.country_queue)


def test_wrong_click_keeps_target(geo: GeoData) -> None:
    state = playing_game(geo)

    state, result = map_quiz.submit_click(state, "AR", now_utc=NOW)

    assert result is map_quiz.MapClickResult.WRONG
    assert state.current_target == "BR"
    assert state.current_index == 0
    assert state.attempts[-1].clicked_code == "AR"


def test_correct_click_advances(geo: GeoData) -> None:
    state = playing_game(geo)

    state, result = map_quiz.submit_click(state, "BR", now_utc=NOW)

    assert result is map_quiz.MapClickResult.CORRECT
    assert state.current_target == "AR"
    assert state.score == 10
    assert state.streak == 1


def test_skip_moves_on_and_counts_separately(geo: GeoData) -> None:
    state = replace(playing_game(geo, difficulty=Difficulty.HARD), score=12)

    state, _ = map_quiz.submit_click(state, "CL", now_utc=NOW)
    state = map_quiz.skip_country(state, now_utc=NOW)
    stats = map_quiz.map_quiz_stats(state)

    assert state.current_target == "AR"
    assert state.score == 0
    assert stats.wrong == 1
    assert stats.skipped == 1
    assert stats.correct == 0
    assert stats == map_quiz.map_quiz_stats(state)


def test_click_after_resolution_is_ignored(geo: GeoData) -> None:
    state = map_quiz.end_game(playing_game(geo))

    updated, result = map_quiz.submit_click(state, "BR", now_utc=NOW)

    assert result is map_quiz.MapClickResult.WRONG
    assert updated is state
