"""
Wordle CLI - Command-line entry point.

Usage:
    wordle [-len word-length] [-max max-guesses] [dictionary]

Exit codes:
    0  the word was guessed
    1  bad arguments
    2  the dictionary cannot be used
    3  the game was lost (the answer is printed on stderr)
"""

import argparse
import logging
import random
import sys
from enum import IntEnum

from pydantic import ValidationError

from .config import ENVIRONMENT_VARIABLES, GameConfig, load_config
from .dictionary import DictionaryError, load_words
from .session import GameLoop, LineReader, SessionState, create_session

logger = logging.getLogger(__name__)

USAGE = "Usage: wordle [-len word-length] [-max max-guesses] [dictionary]"
OPTIONS = ("-len", "-max")


class ExitCode(IntEnum):
    """Process exit codes."""
    WON = 0
    USAGE = 1
    DICTIONARY = 2
    LOST = 3


class UsageError(Exception):
    """
    Raised when the invocation is invalid.

    `detail` is a message for the user, set when the usage line alone
    would not explain the problem.
    """

    def __init__(self, message: str, detail: str | None = None):
        self.detail = detail
        super().__init__(message)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


class _StoreOnce(argparse.Action):
    """Store an option value, rejecting a repeated option."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            raise argparse.ArgumentError(self, "may only be given once")
        setattr(namespace, self.dest, values)


def _single_digit(text: str) -> int:
    if len(text) != 1 or not text.isdigit():
        raise argparse.ArgumentTypeError(f"expected a single digit, got {text!r}")
    return int(text)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="wordle",
        usage=USAGE,
        description="Wordle - guess the hidden word",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-len", dest="word_length", type=_single_digit,
                        action=_StoreOnce, help="Word length (3-9)")
    parser.add_argument("-max", dest="max_attempts", type=_single_digit,
                        action=_StoreOnce, help="Maximum guesses (3-9)")
    parser.add_argument("dictionary", nargs="?", help="Path to dictionary file")
    return parser


def parse_args(argv: list[str] | None = None) -> GameConfig:
    """
    Parse the command line into a GameConfig.

    Raises UsageError for any invalid invocation.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Prefixes such as -l or -m must not stand in for -len or -max
    for arg in argv:
        if arg.startswith("-") and arg not in OPTIONS:
            raise UsageError(f"unknown option: {arg!r}")

    args = build_parser().parse_args(argv)

    if args.dictionary == "":
        raise UsageError("empty dictionary argument")

    try:
        return load_config(
            word_length=args.word_length,
            max_attempts=args.max_attempts,
            dictionary=args.dictionary,
        )
    except ValidationError as e:
        raise UsageError(str(e), detail=_environment_detail(e)) from e


def _environment_detail(error: ValidationError) -> str | None:
    """Name the environment variable behind a validation error, if any."""
    for item in error.errors():
        variable = ENVIRONMENT_VARIABLES.get(item["loc"][0] if item["loc"] else None)
        if variable:
            return f"invalid {variable} value {item['input']!r}: {item['msg']}"
    return None


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    try:
        config = parse_args(argv)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        if e.detail:
            print(f"wordle: {e.detail}", file=sys.stderr, flush=True)
        print(USAGE, file=sys.stderr, flush=True)
        return ExitCode.USAGE

    configure_logging(config.log_level)
    logger.debug("Starting with %s", config)

    try:
        words = load_words(config.dictionary, config.word_length)
        session = create_session(words, config.max_attempts, random.Random(config.seed))
    except DictionaryError as e:
        print(
            f'wordle: dictionary file "{config.dictionary}" {e.reason}',
            file=sys.stderr,
            flush=True,
        )
        return ExitCode.DICTIONARY

    loop = GameLoop(session, LineReader(sys.stdin), sys.stdout, sys.stderr)
    if loop.run() == SessionState.WON:
        return ExitCode.WON
    return ExitCode.LOST


if __name__ == "__main__":
    sys.exit(main())
