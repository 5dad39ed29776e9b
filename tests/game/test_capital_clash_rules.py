from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from geoarena.game import capitals
from geoarena.game.capitals import CapitalQuestion, QuestionDirection
from geoarena.game.types import Difficulty
from geoarena.geo.data import GeoData

UTC = timezone.utc
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

TO_CAPITAL = QuestionDirection.COUNTRY_TO_CAPITAL
TO_COUNTRY = QuestionDirection.CAPITAL_TO_COUNTRY


def playing_game(
    geo: GeoData,
    *questions: CapitalQuestion,
    difficulty: Difficulty = Difficulty.MEDIUM,
) -> capitals.CapitalClashState:
    state = capitals.create_game(geo, difficulty=difficulty, rng=random.Random(5))
    state = capitals.start_playing(state, now_utc=NOW)
    return replace(state, questions=questions)


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("Washington, D.C.", True),
        ("washington", True),
        ("Wash", True),
        ("Was", False),
        ("Seattle", False),
    ],
)
def test_capital_answer_accepts_partial_match(geo: GeoData, answer: str, expected: bool) -> None:
    question = CapitalQuestion(country_code="US", direction=TO_CAPITAL)

    assert capitals.is_correct_answer(question, answer, names=geo.names) is expected


def test_capital_answer_accepts_localized_capital(geo: GeoData) -> None:
    question = CapitalQuestion(country_code="AT", direction=TO_CAPITAL)

    assert capitals.is_correct_answer(question, "Wien", names=geo.names, locale="de") is True
    assert capitals.is_correct_answer(question, "Vienna", names=geo.names, locale="de") is True
    assert capitals.is_correct_answer(question, "Wien", names=geo.names) is False


@pytest.mark.parametrize(
    ("answer", "locale", "expected"),
    [
        ("Germany", None, True),
        ("DE", None, True),
        ("Deutschland", "de", True),
        ("Germ", None, False),
        ("Austria", None, False),
    ],
)
def test_country_answer_needs_full_name(geo: GeoData, answer: str, locale: str | None, expected: bool) -> None:
    question = CapitalQuestion(country_code="DE", direction=TO_COUNTRY)

    assert capitals.is_correct_answer(question, answer, names=geo.names, locale=locale) is expected


def test_washington_scenario_scores_correct(geo: GeoData) -> None:
    state = playing_game(geo, CapitalQuestion(country_code="US", direction=TO_CAPITAL))

    state, result = capitals.submit_guess(state, "Washington", geo=geo, now_utc=NOW)

    assert result is capitals.CapitalGuessResult.CORRECT
    assert state.score == 10
    assert state.attempts[-1].answer == "Washington"
    assert state.current_question is None


def test_wrong_answer_penalizes_and_resets_streak(geo: GeoData) -> None:
    state = replace(
        playing_game(
            geo,
            CapitalQuestion(country_code="FR", direction=TO_CAPITAL),
            CapitalQuestion(country_code="IT", direction=TO_CAPITAL),
        ),
        score=50,
        streak=5,
        best_streak=5,
    )
    assert capitals.current_multiplier(state) == 2

    state, result = capitals.submit_guess(state, "Lyon", geo=geo, now_utc=NOW)
    assert result is capitals.CapitalGuessResult.WRONG
    assert state.score == 45
    assert state.streak == 0

    state, result = capitals.submit_guess(state, "Rome", geo=geo, now_utc=NOW)
    assert result is capitals.CapitalGuessResult.CORRECT
    assert state.score == 55


def test_skip_has_no_penalty_but_breaks_streak(geo: GeoData) -> None:
    state = replace(
        playing_game(geo, CapitalQuestion(country_code="FR", direction=TO_CAPITAL), difficulty=Difficulty.HARD),
        score=20,
        streak=3,
    )

    state = capitals.skip_question(state, now_utc=NOW)

    assert state.score == 20
    assert state.streak == 0
    assert state.attempts[-1].skipped is True
    assert capitals.capital_clash_stats(state).skipped == 1


def test_easy_questions_always_ask_for_the_country(geo: GeoData) -> None:
    state = capitals.create_game(geo, difficulty=Difficulty.EASY, rng=random.Random(8))

    assert {question.direction for question in state.questions} == {TO_COUNTRY}


def test_medium_questions_mix_directions(geo: GeoData) -> None:
    state = capitals.create_game(geo, difficulty=Difficulty.MEDIUM, rng=random.Random(8))

    assert {question.direction for question in state.questions} == {TO_COUNTRY, TO_CAPITAL}


def test_question_display_follows_locale(geo: GeoData) -> None:
    question = CapitalQuestion(country_code="AT", direction=TO_CAPITAL)

    english = capitals.question_display(question, names=geo.names)
    german = capitals.question_display(question, names=geo.names, locale="de")
    reverse = capitals.question_display(replace(question, direction=TO_COUNTRY), names=geo.names)

    assert english == capitals.QuestionDisplay(prompt="Austria", answer="Vienna")
    assert german == capitals.QuestionDisplay(prompt="Österreich", answer="Wien")
    assert reverse == capitals.QuestionDisplay(prompt="Vienna", answer="Austria")


def test_submit_during_countdown_is_ignored(geo: GeoData) -> None:
    state = capitals.create_game(geo, difficulty=Difficulty.MEDIUM, rng=random.Random(5))

    updated, result = capitals.submit_guess(state, "Paris", geo=geo, now_utc=NOW)

    assert result is capitals.CapitalGuessResult.WRONG
    assert updated is state
