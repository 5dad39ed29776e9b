from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geoarena.game.types import Continent, Difficulty, TimedPhase


class BlitzGuessResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class BlitzGuess:
    anchor_code: str
    country_code: str | None
    result: BlitzGuessResult


@dataclass(frozen=True, slots=True)
class BorderBlitzState:
    phase: TimedPhase
    difficulty: Difficulty
    continent: Continent
    anchor_code: str
    found_neighbors: tuple[str, ...]
    hinted_neighbors: tuple[str, ...]
    guesses: tuple[BlitzGuess, ...]
    wrong_attempts: int
    consecutive_wrong_attempts: int
    hints_used: int
    skips_used: int
    score: int
    total_duration: int


@dataclass(frozen=True, slots=True)
class BorderBlitzStats:
    score: int
    found: int
    total: int
    all_found: bool
    wrong_attempts: int
    hints_used: int
    skips_used: int
    accuracy: int
