from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Continent(str, Enum):
    ALL = "all"
    EUROPE = "Europe"
    ASIA = "Asia"
    AFRICA = "Africa"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"

    def matches(self, continent: str | None) -> bool:
        return self is Continent.ALL or continent == self.value


class PhaseKind(str, Enum):
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    ROUND_RESULT = "roundResult"
    REVEAL = "reveal"
    EXECUTION = "execution"
    RESOLUTION = "resolution"


@dataclass(frozen=True, slots=True)
class CountdownPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.COUNTDOWN

    countdown_left: int


@dataclass(frozen=True, slots=True)
class PlayingPhase:
    """Main timed phase of the queue games; `shown_at` marks when the current item appeared."""

    kind: ClassVar[PhaseKind] = PhaseKind.PLAYING

    time_left: int
    shown_at: datetime


@dataclass(frozen=True, slots=True)
class ResolutionPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.RESOLUTION


TimedPhase = CountdownPhase | PlayingPhase | ResolutionPhase
