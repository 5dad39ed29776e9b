from __future__ import annotations


def streak_multiplier(streak: int, *, step: int, max_multiplier: int) -> int:
    return min(1 + streak // step, max_multiplier)


def clamp_score(score: int) -> int:
    return max(0, score)


def next_streak(streak: int, best_streak: int, *, is_correct: bool) -> tuple[int, int]:
    """Returns (streak, best_streak) after one answered item."""
    if not is_correct:
        return 0, best_streak
    streak += 1
    return streak, max(best_streak, streak)
