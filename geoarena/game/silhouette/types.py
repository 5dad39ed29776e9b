from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from geoarena.game.types import Continent, Difficulty, PhaseKind


class HintType(str, Enum):
    CONTINENT = "continent"
    FIRST_LETTER = "firstLetter"
    CAPITAL = "capital"
    NEIGHBORS = "neighbors"


class SilhouetteGuessResult(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class SilhouetteHint:
    """`value` holds codes for capital/neighbors hints so the caller can localize them."""

    type: HintType
    value: str


@dataclass(frozen=True, slots=True)
class SilhouetteRound:
    country_code: str
    guesses: tuple[str, ...]
    hints_revealed: tuple[SilhouetteHint, ...]
    hints_available: tuple[SilhouetteHint, ...]
    solved: bool = False
    skipped: bool = False
    points: int = 0


@dataclass(frozen=True, slots=True)
class RoundPlayingPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.PLAYING

    time_left: int


@dataclass(frozen=True, slots=True)
class RoundResultPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.ROUND_RESULT


@dataclass(frozen=True, slots=True)
class SilhouetteResolutionPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.RESOLUTION


SilhouettePhase = RoundPlayingPhase | RoundResultPhase | SilhouetteResolutionPhase


@dataclass(frozen=True, slots=True)
class SilhouetteState:
    phase: SilhouettePhase
    difficulty: Difficulty
    continent: Continent
    rounds: tuple[SilhouetteRound, ...]
    current_round: int
    total_score: int
    round_duration: int

    @property
    def total_rounds(self) -> int:
        return len(self.rounds)


@dataclass(frozen=True, slots=True)
class SilhouetteStats:
    total_score: int
    max_possible: int
    percentage: int
    solved: int
    skipped: int
    total_rounds: int
    total_hints: int
    total_wrong: int
