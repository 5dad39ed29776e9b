from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geoarena.game.types import Continent, Difficulty, TimedPhase


class QuestionDirection(str, Enum):
    COUNTRY_TO_CAPITAL = "countryToCapital"
    CAPITAL_TO_COUNTRY = "capitalToCountry"


class CapitalGuessResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass(frozen=True, slots=True)
class CapitalQuestion:
    country_code: str
    direction: QuestionDirection


@dataclass(frozen=True, slots=True)
class QuestionDisplay:
    prompt: str
    answer: str


@dataclass(frozen=True, slots=True)
class CapitalAttempt:
    question: CapitalQuestion
    answer: str
    correct: bool
    time_ms: int
    skipped: bool = False


@dataclass(frozen=True, slots=True)
class CapitalClashState:
    phase: TimedPhase
    difficulty: Difficulty
    continent: Continent
    questions: tuple[CapitalQuestion, ...]
    current_index: int
    attempts: tuple[CapitalAttempt, ...]
    score: int
    streak: int
    best_streak: int
    total_duration: int

    @property
    def current_question(self) -> CapitalQuestion | None:
        if self.current_index >= len(self.questions):
            return None
        return self.questions[self.current_index]


@dataclass(frozen=True, slots=True)
class CapitalClashStats:
    score: int
    correct: int
    wrong: int
    skipped: int
    total: int
    best_streak: int
    avg_time_ms: int
    accuracy: int
