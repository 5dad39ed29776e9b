from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from geoarena.game.types import Continent, Difficulty, PhaseKind


class MoveResult(str, Enum):
    CORRECT = "correct"
    ALREADY_VISITED = "already_visited"
    NOT_NEIGHBOR = "not_neighbor"
    INVALID_COUNTRY = "invalid_country"
    DESTINATION_COUNTRY = "destination_country"


@dataclass(frozen=True, slots=True)
class GameMove:
    country_code: str
    result: MoveResult
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class RevealPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.REVEAL

    time_left: int


@dataclass(frozen=True, slots=True)
class ExecutionPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.EXECUTION

    execution_time_left: int
    move_time_left: int


@dataclass(frozen=True, slots=True)
class ConnectResolutionPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.RESOLUTION

    is_complete: bool
    is_timeout: bool


ConnectPhase = RevealPhase | ExecutionPhase | ConnectResolutionPhase


@dataclass(frozen=True, slots=True)
class ConnectGameState:
    phase: ConnectPhase
    difficulty: Difficulty
    continent: Continent
    start_code: str
    end_code: str
    optimal_path: tuple[str, ...]
    player_path: tuple[str, ...]
    moves: tuple[GameMove, ...]
    current_position: str
    wrong_attempts: int
    consecutive_wrong_attempts: int
    hints_used: int
    score: int
    reveal_duration: int
    execution_duration: int
    move_duration: int

    @property
    def is_complete(self) -> bool:
        return isinstance(self.phase, ConnectResolutionPhase) and self.phase.is_complete

    @property
    def is_timeout(self) -> bool:
        return isinstance(self.phase, ConnectResolutionPhase) and self.phase.is_timeout


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    moves: int
    wrong_penalty: int
    hint_penalty: int
    timeout_penalty: int
    total: int
    optimal_moves: int
    efficiency: int


@dataclass(frozen=True, slots=True)
class RouteRating:
    label: str
    color: str


@dataclass(frozen=True, slots=True)
class ConnectStats:
    breakdown: ScoreBreakdown
    rating: RouteRating
    wrong_attempts: int
    hints_used: int
    is_complete: bool
    is_timeout: bool
