from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Protocol, TypeVar

from geoarena.game.sampling import resolve_now
from geoarena.game.types import CountdownPhase, PlayingPhase, ResolutionPhase, TimedPhase

COUNTDOWN_SECONDS = 3


class _TimedState(Protocol):
    phase: TimedPhase
    total_duration: int


S = TypeVar("S", bound=_TimedState)


def start_playing(state: S, *, now_utc: datetime | None = None) -> S:
    if not isinstance(state.phase, CountdownPhase):
        return state
    return replace(
        state,
        phase=PlayingPhase(time_left=state.total_duration, shown_at=resolve_now(now_utc)),
    )


def tick_countdown(state: S, *, now_utc: datetime | None = None) -> S:
    phase = state.phase
    if not isinstance(phase, CountdownPhase):
        return state
    countdown_left = phase.countdown_left - 1
    if countdown_left <= 0:
        return start_playing(state, now_utc=now_utc)
    return replace(state, phase=CountdownPhase(countdown_left=countdown_left))


def end_game(state: S) -> S:
    if isinstance(state.phase, ResolutionPhase):
        return state
    return replace(state, phase=ResolutionPhase())


def tick_game(state: S) -> S:
    phase = state.phase
    if not isinstance(phase, PlayingPhase):
        return state
    time_left = phase.time_left - 1
    if time_left <= 0:
        return end_game(state)
    return replace(state, phase=replace(phase, time_left=time_left))


def time_left(state: _TimedState) -> int:
    phase = state.phase
    if isinstance(phase, PlayingPhase):
        return phase.time_left
    if isinstance(phase, CountdownPhase):
        return state.total_duration
    return 0


def time_left_percent(state: _TimedState) -> int:
    if state.total_duration <= 0:
        return 0
    return round(time_left(state) / state.total_duration * 100)
