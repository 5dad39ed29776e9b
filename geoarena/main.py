from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from typing import Protocol

import structlog

from geoarena.core.config import get_settings
from geoarena.core.logging import configure_logging
from geoarena.game import border_blitz, capitals, connect, flags, map_quiz, silhouette
from geoarena.game.timed import start_playing, tick_game, time_left
from geoarena.game.types import Continent, Difficulty, ResolutionPhase
from geoarena.geo.data import GeoData, load_geo_data
from geoarena.geo.errors import GeoDataError

logger = structlog.get_logger("geoarena.main")

GAMES = ("connect", "silhouette", "flags", "capitals", "map-quiz", "border-blitz")
QUIT_COMMAND = ":quit"
HINT_COMMAND = ":hint"
SKIP_COMMAND = ":skip"


def _flag_emoji(code: str) -> str:
    # Regional indicator pairs render as the flag in most terminals.
    return "".join(chr(0x1F1E6 + ord(letter) - ord("A")) for letter in code.upper())


class GameDriver(Protocol):
    @property
    def finished(self) -> bool: ...

    def prompt(self) -> str: ...

    def answer(self, text: str) -> str: ...

    def hint(self) -> str: ...

    def skip(self) -> str: ...

    def tick(self) -> None: ...

    def summary(self) -> str: ...


class ConnectDriver:
    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self._rng = rng
        # The route is printed up front, so the reveal countdown is not waited out.
        self.state = connect.start_execution(
            connect.create_game(geo, difficulty=difficulty, continent=continent, rng=rng)
        )

    def _name(self, code: str) -> str:
        return self._geo.names.country_name(code, self._locale)

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, connect.ConnectResolutionPhase)

    def prompt(self) -> str:
        phase = self.state.phase
        left = phase.execution_time_left if isinstance(phase, connect.ExecutionPhase) else 0
        return (
            f"{self._name(self.state.start_code)} -> {self._name(self.state.end_code)} | "
            f"at {self._name(self.state.current_position)} | {left}s left > "
        )

    def answer(self, text: str) -> str:
        self.state, result = connect.submit_move(self.state, text, geo=self._geo, locale=self._locale)
        return result.value

    def hint(self) -> str:
        self.state, code = connect.use_hint(self.state, geo=self._geo)
        return f"try {self._name(code)}" if code else "no hint available"

    def skip(self) -> str:
        if not connect.can_skip(self.state):
            return "skip unlocks after 2 wrong attempts in a row"
        self.state = connect.start_execution(connect.skip_route(self.state, geo=self._geo, rng=self._rng))
        return "new route"

    def tick(self) -> None:
        self.state = connect.tick_move(connect.tick_execution(self.state))

    def summary(self) -> str:
        stats = connect.connect_stats(self.state)
        route = " -> ".join(self._name(code) for code in self.state.optimal_path)
        return (
            f"{stats.rating.label}: score {stats.breakdown.total} "
            f"(optimal {stats.breakdown.optimal_moves}, efficiency {stats.breakdown.efficiency}%)\n"
            f"shortest route: {route}"
        )


class SilhouetteDriver:
    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self.state = silhouette.create_game(geo, difficulty=difficulty, continent=continent, rng=rng)

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, silhouette.SilhouetteResolutionPhase)

    def _hint_text(self, hint: silhouette.SilhouetteHint) -> str:
        if hint.type is silhouette.HintType.CAPITAL:
            return f"capital: {self._geo.names.capital_name(hint.value, self._locale)}"
        if hint.type is silhouette.HintType.NEIGHBORS:
            names = (self._geo.names.country_name(code, self._locale) for code in hint.value.split(","))
            return f"borders: {', '.join(names)}"
        return f"{hint.type.value}: {hint.value}"

    def _finish_round(self, message: str) -> str:
        answer = self.state.rounds[self.state.current_round].country_code
        self.state = silhouette.next_round(self.state)
        return f"{message} (it was {self._geo.names.country_name(answer, self._locale)})"

    def prompt(self) -> str:
        phase = self.state.phase
        left = phase.time_left if isinstance(phase, silhouette.RoundPlayingPhase) else 0
        return f"round {self.state.current_round + 1}/{self.state.total_rounds} | {left}s left > "

    def answer(self, text: str) -> str:
        self.state, result = silhouette.submit_guess(self.state, text, geo=self._geo, locale=self._locale)
        if result is silhouette.SilhouetteGuessResult.CORRECT:
            points = self.state.rounds[self.state.current_round].points
            return self._finish_round(f"correct, +{points}")
        return result.value

    def hint(self) -> str:
        self.state, hint = silhouette.reveal_hint(self.state)
        return self._hint_text(hint) if hint else "no hints left"

    def skip(self) -> str:
        self.state = silhouette.skip_round(self.state)
        return self._finish_round("skipped")

    def tick(self) -> None:
        self.state = silhouette.tick_round(self.state)
        if isinstance(self.state.phase, silhouette.RoundResultPhase):
            self.state = silhouette.next_round(self.state)

    def summary(self) -> str:
        stats = silhouette.silhouette_stats(self.state)
        return (
            f"score {stats.total_score}/{stats.max_possible} ({stats.percentage}%), "
            f"solved {stats.solved}/{stats.total_rounds}, hints {stats.total_hints}"
        )


class FlagSprintDriver:
    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self.state = start_playing(flags.create_game(geo, difficulty=difficulty, continent=continent, rng=rng))

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, ResolutionPhase) or self.state.current_flag is None

    def prompt(self) -> str:
        code = self.state.current_flag or ""
        return f"{_flag_emoji(code)} | x{flags.current_multiplier(self.state)} | {time_left(self.state)}s > "

    def answer(self, text: str) -> str:
        expected = self.state.current_flag or ""
        self.state, result = flags.submit_guess(self.state, text, geo=self._geo, locale=self._locale)
        if result is flags.FlagGuessResult.WRONG:
            return f"wrong, it was {self._geo.names.country_name(expected, self._locale)}"
        return result.value

    def hint(self) -> str:
        return "no hints in this game"

    def skip(self) -> str:
        self.state = flags.skip_flag(self.state)
        return "skipped"

    def tick(self) -> None:
        self.state = tick_game(self.state)

    def summary(self) -> str:
        stats = flags.flag_sprint_stats(self.state)
        return f"score {stats.score}, {stats.correct}/{stats.total} correct, best streak {stats.best_streak}"


class CapitalClashDriver:
    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self.state = start_playing(capitals.create_game(geo, difficulty=difficulty, continent=continent, rng=rng))

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, ResolutionPhase) or self.state.current_question is None

    def _display(self) -> capitals.QuestionDisplay | None:
        question = self.state.current_question
        if question is None:
            return None
        return capitals.question_display(question, names=self._geo.names, locale=self._locale)

    def prompt(self) -> str:
        display = self._display()
        prompt = display.prompt if display else ""
        return f"{prompt} | x{capitals.current_multiplier(self.state)} | {time_left(self.state)}s > "

    def answer(self, text: str) -> str:
        display = self._display()
        self.state, result = capitals.submit_guess(self.state, text, geo=self._geo, locale=self._locale)
        if result is capitals.CapitalGuessResult.WRONG and display is not None:
            return f"wrong, it was {display.answer}"
        return result.value

    def hint(self) -> str:
        return "no hints in this game"

    def skip(self) -> str:
        self.state = capitals.skip_question(self.state)
        return "skipped"

    def tick(self) -> None:
        self.state = tick_game(self.state)

    def summary(self) -> str:
        stats = capitals.capital_clash_stats(self.state)
        return f"score {stats.score}, {stats.correct}/{stats.total} correct, accuracy {stats.accuracy}%"


class MapQuizDriver:
    """Clicks are typed as country names and resolved before they reach the engine."""

    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self.state = start_playing(map_quiz.create_game(geo, difficulty=difficulty, continent=continent, rng=rng))

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, ResolutionPhase) or self.state.current_target is None

    def prompt(self) -> str:
        target = self._geo.names.country_name(self.state.current_target or "", self._locale)
        return f"find {target} | {time_left(self.state)}s > "

    def answer(self, text: str) -> str:
        code = self._geo.names.resolve_country(text, self._locale)
        if code is None:
            return "unknown country"
        self.state, result = map_quiz.submit_click(self.state, code)
        return result.value

    def hint(self) -> str:
        return "no hints in this game"

    def skip(self) -> str:
        self.state = map_quiz.skip_country(self.state)
        return "skipped"

    def tick(self) -> None:
        self.state = tick_game(self.state)

    def summary(self) -> str:
        stats = map_quiz.map_quiz_stats(self.state)
        return f"score {stats.score}, {stats.correct} found, {stats.wrong} wrong clicks, {stats.skipped} skipped"


class BorderBlitzDriver:
    def __init__(self, geo: GeoData, *, difficulty: Difficulty, continent: Continent, locale: str, rng: random.Random):
        self._geo = geo
        self._locale = locale
        self._rng = rng
        self.state = start_playing(
            border_blitz.create_game(geo, difficulty=difficulty, continent=continent, rng=rng)
        )

    @property
    def finished(self) -> bool:
        return isinstance(self.state.phase, ResolutionPhase)

    def prompt(self) -> str:
        anchor = self._geo.names.country_name(self.state.anchor_code, self._locale)
        total = len(self._geo.graph.neighbors(self.state.anchor_code))
        return f"{anchor}: {len(self.state.found_neighbors)}/{total} | {time_left(self.state)}s > "

    def answer(self, text: str) -> str:
        self.state, result = border_blitz.submit_guess(self.state, text, geo=self._geo, locale=self._locale)
        return result.value

    def hint(self) -> str:
        self.state, code = border_blitz.use_hint(self.state, geo=self._geo, rng=self._rng)
        return self._geo.names.country_name(code, self._locale) if code else "no hint available"

    def skip(self) -> str:
        if not border_blitz.can_skip(self.state):
            return "skip unlocks after 2 wrong attempts in a row"
        self.state = border_blitz.skip_anchor(self.state, geo=self._geo, rng=self._rng)
        return "new country"

    def tick(self) -> None:
        self.state = tick_game(self.state)

    def summary(self) -> str:
        stats = border_blitz.border_blitz_stats(self.state, geo=self._geo)
        return f"score {stats.score}, found {stats.found}/{stats.total}, accuracy {stats.accuracy}%"


DRIVERS: dict[str, Callable[..., GameDriver]] = {
    "connect": ConnectDriver,
    "silhouette": SilhouetteDriver,
    "flags": FlagSprintDriver,
    "capitals": CapitalClashDriver,
    "map-quiz": MapQuizDriver,
    "border-blitz": BorderBlitzDriver,
}


def play(
    driver: GameDriver,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Run one session; wall-clock seconds spent at the prompt become ticks before the input applies."""
    last_tick = clock()
    while not driver.finished:
        try:
            text = read(driver.prompt()).strip()
        except EOFError:
            break

        elapsed = int(clock() - last_tick)
        last_tick += elapsed
        for _ in range(elapsed):
            if driver.finished:
                break
            driver.tick()
        if driver.finished:
            write("time's up")
            break

        if text == QUIT_COMMAND:
            break
        if text == HINT_COMMAND:
            write(driver.hint())
        elif text == SKIP_COMMAND:
            write(driver.skip())
        elif text:
            write(driver.answer(text))

    write(driver.summary())


def _cmd_route(args: argparse.Namespace, geo: GeoData) -> int:
    start = geo.names.resolve_country(args.start, args.locale)
    end = geo.names.resolve_country(args.end, args.locale)
    if start is None or end is None:
        raise ValueError(f"unknown country: {args.start if start is None else args.end}")

    path = geo.graph.shortest_path(start, end)
    if path is None:
        print(f"No land route between {start} and {end}.")
        return 1
    print(" -> ".join(geo.names.country_name(code, args.locale) for code in path))
    print(f"hops: {len(path) - 1}")
    return 0


def _cmd_play(args: argparse.Namespace, geo: GeoData) -> int:
    seed = args.seed if args.seed is not None else get_settings().rng_seed
    rng = random.Random(seed)
    driver = DRIVERS[args.game](
        geo,
        difficulty=Difficulty(args.difficulty),
        continent=Continent(args.continent),
        locale=args.locale,
        rng=rng,
    )
    logger.info("play_session_started", game=args.game, difficulty=args.difficulty, continent=args.continent)
    play(driver)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="geoarena", description="Geography mini-games in the terminal")
    subparsers = parser.add_subparsers(dest="command", required=True)

    route = subparsers.add_parser("route", help="print the shortest land route between two countries")
    route.add_argument("start")
    route.add_argument("end")
    route.add_argument("--locale", default=settings.default_locale)

    subparsers.add_parser("validate-data", help="load and validate the country data")

    game = subparsers.add_parser("play", help="play a game session")
    game.add_argument("game", choices=GAMES)
    game.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=settings.default_difficulty)
    game.add_argument("--continent", choices=[c.value for c in Continent], default=settings.default_continent)
    game.add_argument("--locale", default=settings.default_locale)
    game.add_argument("--seed", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    args = _build_parser().parse_args(argv)

    try:
        geo = load_geo_data()
    except GeoDataError as exc:
        logger.error("geo_data_invalid", error=str(exc))
        print(f"Country data is invalid: {exc}")
        return 1

    if args.command == "validate-data":
        print(f"OK: {len(geo.catalog)} countries, {len(geo.graph.connected_codes)} with land borders.")
        return 0
    if args.command == "route":
        return _cmd_route(args, geo)
    return _cmd_play(args, geo)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
