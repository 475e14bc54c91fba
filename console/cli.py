"""Command-line entry point for console blackjack."""

from __future__ import annotations

import argparse
import logging
import logging.config
import sys
from random import Random
from typing import Sequence

from config import config
from console.prompts import prompt_action, prompt_num_hands
from console.render import ConsoleRenderer
from console.rules import RULES_TEXT
from core.cards import Face, parse_face
from core.exceptions import BlackjackError
from core.game import BlackjackGame, Cheat, GameDebugger
from core.hand import HandStatus

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "[%(asctime)s] [%(levelname)-5s] [%(name)-20s] --- %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    })


def _int_list(value: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers: {value}") from None


def _status_list(value: str) -> tuple[HandStatus | None, ...]:
    statuses: list[HandStatus | None] = []
    for part in value.split(","):
        name = part.strip().upper().replace(" ", "_")
        if name in ("", "NONE", "-"):
            statuses.append(None)
            continue
        try:
            statuses.append(HandStatus[name])
        except KeyError:
            raise argparse.ArgumentTypeError(f"unknown hand status: {part}") from None
    return tuple(statuses)


def _face_list(value: str) -> tuple[Face, ...]:
    try:
        return tuple(parse_face(part) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_debugger(args: argparse.Namespace) -> GameDebugger:
    """
    Collect debug overrides from parsed arguments.

    Any override flag turns debug mode on by itself.
    """
    overrides = (args.hands is not None, args.statuses, args.all_aces, args.top_faces)
    if not (args.debug or any(overrides)):
        return GameDebugger()
    cheats = (Cheat.ALL_ACES,) if args.all_aces else ()
    return GameDebugger(
        num_cards_per_hand=args.hands,
        statuses_for_each_hand=args.statuses or (),
        cheats=cheats,
        deck_card_faces=args.top_faces or (),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackjack", description="Console blackjack")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help="Logging level",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play a game (default)")
    play.add_argument("--seed", type=int, default=config.seed, help="Seed for the shuffle")
    play.add_argument(
        "--debug",
        action="store_true",
        default=config.debug,
        help="Enable debug mode (implied by any override below)",
    )
    play.add_argument("--hands", type=_int_list, default=None,
                      help="Preset card counts per hand, e.g. 2,3")
    play.add_argument("--statuses", type=_status_list, default=None,
                      help="Preset statuses per hand, e.g. split,none")
    play.add_argument("--all-aces", action="store_true", help="Turn every card into an Ace")
    play.add_argument("--top-faces", type=_face_list, default=None,
                      help="Faces forced at the top of the deck, e.g. A,K,8,8")

    sub.add_parser("rules", help="Show the house rules")
    return parser


def cmd_play(args: argparse.Namespace, debugger: GameDebugger) -> int:
    rng = Random(args.seed) if args.seed is not None else None
    game = BlackjackGame(debugger=debugger, rng=rng)

    print("Shuffling...")
    outcomes = game.start(
        choose_action=prompt_action,
        choose_num_hands=prompt_num_hands,
        render=ConsoleRenderer(),
    )

    for index, (hand, outcome) in enumerate(zip(game.player_hands, outcomes), 1):
        print(f"Hand {index}: {hand.value:>2}  {outcome}")
    print(f"Dealer: {game.dealer_hand.value:>2}")
    print("Game over")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Defaults from BLACKJACK_LOG_LEVEL bypass the choices check
    if args.log_level not in LOG_LEVELS:
        parser.error(f"unknown log level: {args.log_level}")
    configure_logging(args.log_level)

    if args.command == "rules":
        print(RULES_TEXT)
        return 0
    if args.command is None:
        args = parser.parse_args([*(argv if argv is not None else sys.argv[1:]), "play"])

    try:
        debugger = build_debugger(args)
    except ValueError as exc:
        parser.error(str(exc))
    if debugger.is_active:
        logger.info("Debug overrides active: %s", debugger)

    try:
        return cmd_play(args, debugger)
    except BlackjackError as exc:
        logger.error("Game aborted: %s", exc, exc_info=True)
        print(f"> ERROR: game aborted: {exc}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
