from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from .commands import compare as cmd_compare
from .config import Settings, load_settings

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuzzy personal name matching")
    parser.add_argument("--config", type=Path, help="Path to name-match.yaml")
    parser.add_argument("--log-level", default=None, help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    compare_parser = subparsers.add_parser(
        "compare", help="Score how closely two names match"
    )
    compare_parser.add_argument("input_name", help="Name as entered")
    compare_parser.add_argument("given_name", help="Name on record")
    compare_parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Emit machine-readable JSON to stdout",
    )
    compare_parser.add_argument(
        "--show-strategy",
        action="store_true",
        default=None,
        help="Append the scoring strategy to the text output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings: Settings = load_settings(args.config)
    except FileNotFoundError as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")
    except (ValidationError, yaml.YAMLError) as exc:
        parser.exit(2, f"{parser.prog}: error: invalid config\n{exc}\n")

    configure_logging(args.log_level or settings.logging.level)

    match args.command:
        case "compare":
            lines = cmd_compare.run(
                settings,
                args.input_name,
                args.given_name,
                json_output=args.json,
                show_strategy=args.show_strategy,
            )
            for line in lines:
                print(line)
        case _:
            parser.error("Unknown command")


if __name__ == "__main__":
    main()
