from geoarena.game.capitals.rules import (
    capital_clash_stats,
    create_game,
    current_multiplier,
    is_correct_answer,
    question_display,
    skip_question,
    submit_guess,
)
from geoarena.game.capitals.types import (
    CapitalAttempt,
    CapitalClashState,
    CapitalClashStats,
    CapitalGuessResult,
    CapitalQuestion,
    QuestionDirection,
    QuestionDisplay,
)
from geoarena.game.timed import end_game, start_playing, tick_countdown, tick_game

__all__ = [
    "CapitalAttempt",
    "CapitalClashState",
    "CapitalClashStats",
    "CapitalGuessResult",
    "CapitalQuestion",
    "QuestionDirection",
    "QuestionDisplay",
    "capital_clash_stats",
    "create_game",
    "current_multiplier",
    "end_game",
    "is_correct_answer",
    "question_display",
    "skip_question",
    "start_playing",
    "submit_guess",
    "tick_countdown",
    "tick_game",
]
