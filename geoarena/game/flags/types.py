from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geoarena.game.types import Continent, Difficulty, TimedPhase


class FlagGuessResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class FlagAttempt:
    country_code: str
    correct: bool
    time_ms: int
    skipped: bool = False


@dataclass(frozen=True, slots=True)
class FlagSprintState:
    phase: TimedPhase
    difficulty: Difficulty
    continent: Continent
    flag_queue: tuple[str, ...]
    current_index: int
    attempts: tuple[FlagAttempt, ...]
    score: int
    streak: int
    best_streak: int
    total_duration: int

    @property
    def current_flag(self) -> str | None:
        if self.current_index >= len(self.flag_queue):
            return None
        return self.flag_queue[self.current_index]


@dataclass(frozen=True, slots=True)
class FlagSprintStats:
    score: int
    correct: int
    wrong: int
    total: int
    best_streak: int
    avg_time_ms: int
    accuracy: int
