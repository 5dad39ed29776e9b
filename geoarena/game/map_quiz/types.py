from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geoarena.game.types import Continent, Difficulty, TimedPhase


class MapClickResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass(frozen=True, slots=True)
class MapQuizAttempt:
    target_code: str
    clicked_code: str | None
    correct: bool
    time_ms: int


@dataclass(frozen=True, slots=True)
class MapQuizState:
    phase: TimedPhase
    difficulty: Difficulty
    continent: Continent
    country_queue: tuple[str, ...]
    current_index: int
    attempts: tuple[MapQuizAttempt, ...]
    score: int
    streak: int
    best_streak: int
    total_duration: int

    @property
    def current_target(self) -> str | None:
        if self.current_index >= len(self.country_queue):
            return None
        return self.country_queue[self.current_index]


@dataclass(frozen=True, slots=True)
class MapQuizStats:
    score: int
    correct: int
    wrong: int
    skipped: int
    total: int
    best_streak: int
    avg_time_ms: int
    accuracy: int
