from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, TextIO

from flashdeck.config import LOG_LEVELS, load_config
from flashdeck.errors import ConfigError
from flashdeck.logic.manager import LogicManager
from flashdeck.logic.result import CommandResult
from flashdeck.logs import configure_logging
from flashdeck.model.card import Card

LOGGER = logging.getLogger(__name__)

PROMPT = "deck> "


def render_cards(cards: Iterable[Card]) -> str:
    lines = [f"{number}. {card.describe()}" for number, card in enumerate(cards, start=1)]
    return "\n".join(lines) if lines else "(no cards to show)"


def _report(logic: LogicManager, result: CommandResult, out: TextIO) -> None:
    print(result.feedback, file=out)
    if result.success and not (result.show_help or result.exit):
        print(render_cards(logic.filtered_cards), file=out)


def run_lines(logic: LogicManager, lines: Iterable[str], out: TextIO) -> bool:
    """Execute ``lines`` in order; returns False if any of them failed."""
    ok = True
    for line in lines:
        result = logic.execute(line)
        _report(logic, result, out)
        ok = ok and result.success
        if result.exit:
            break
    return ok


def repl(logic: LogicManager, stdin: TextIO, out: TextIO) -> None:
    interactive = stdin.isatty()
    while True:
        if interactive:
            print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        result = logic.execute(line)
        _report(logic, result, out)
        if result.exit:
            break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashdeck",
        description="Create, edit, list and practise flashcards",
    )
    parser.add_argument("--config", help="Path to the YAML config file")
    parser.add_argument("--deck", help="Path to the deck JSON file (overrides the config)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging verbosity")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Run a command line and exit; may be given several times",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    if args.deck:
        config = replace(config, deck_file=Path(args.deck))
    configure_logging(args.log_level or config.log_level)
    LOGGER.debug("Using deck file %s", config.deck_file)

    logic = LogicManager.from_config(config)
    if args.command:
        return 0 if run_lines(logic, args.command, sys.stdout) else 1
    repl(logic, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
