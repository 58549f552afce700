"""CLI entry point for Mastermind."""

import argparse
import os
import random
import re
import sys
from typing import Optional

from dotenv import load_dotenv
from tabulate import tabulate

from .console_player import ConsolePlayer
from .game import (
    DEFAULT_MAX_ATTEMPTS,
    CodeGenerator,
    GameSettings,
    InvalidInputError,
    validate_code,
)
from .runner import GameResult, GameSession


INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2**31, 2**31 - 1

# Exact option tokens; anything else shaped like them is dropped before parsing
FLAGS = ('-c', '-t', '--seed', '--verbose')


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a 32-bit integer, returning None instead of raising.

    Accepts surrounding whitespace and a leading sign; rejects underscores,
    non-ASCII digits and out-of-range values.
    """
    if value is None:
        return None
    value = value.strip()
    if not INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def env_int(name: str) -> Optional[int]:
    """Read an integer from the environment, warning on garbage."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    value = parse_int(raw)
    if value is None:
        print(f"Warning: ignoring {name}={raw!r} (not an integer)", file=sys.stderr)
    return value


class StoreGivenAction(argparse.Action):
    """Store the flag's value; a flag given without one changes nothing."""

    def __call__(self, parser, namespace, values, option_string=None):
        if values is not None:
            setattr(namespace, self.dest, values)


class StoreIntAction(argparse.Action):
    """Store the flag's value if it parses as an integer, else keep the current one."""

    def __call__(self, parser, namespace, values, option_string=None):
        number = parse_int(values)
        if number is not None:
            setattr(namespace, self.dest, number)


def drop_malformed_flags(argv: list[str]) -> list[str]:
    """
    Drop tokens that only look like one of our flags (-cabc, -t5, --seed=3)
    and the '--' separator, so argparse never reads them as options.
    """
    return [
        token for token in argv
        if token != '--' and (token in FLAGS or not token.startswith(FLAGS))
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Mastermind: guess the 4 distinct digits (0-8) of the secret code",
        allow_abbrev=False,
        # -h and --help are ordinary unrecognized flags
        add_help=False,
    )

    # Game configuration
    parser.add_argument('-c', dest='code', nargs='?', default=None, metavar='CODE',
                        action=StoreGivenAction,
                        help='Secret code to use instead of a random one (e.g. 0123)')
    parser.add_argument('-t', dest='attempts', nargs='?', default=None, metavar='ATTEMPTS',
                        action=StoreIntAction,
                        help=f'Maximum attempts (default: {DEFAULT_MAX_ATTEMPTS}); '
                             'ignored if not an integer')

    # Execution
    parser.add_argument('--seed', nargs='?', default=None, action=StoreGivenAction,
                        help='Random seed for reproducibility')
    parser.add_argument('--verbose', action='store_true',
                        help='Print a recap of all scored rounds when the game ends')
    return parser


def resolve_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GameSettings:
    """Merge command-line flags over environment defaults."""
    secret = args.code if args.code is not None else os.environ.get("MASTERMIND_SECRET")
    if secret:
        try:
            validate_code(secret)
        except InvalidInputError as e:
            parser.error(str(e))

    max_attempts = args.attempts
    if max_attempts is None:
        max_attempts = env_int("MASTERMIND_MAX_ATTEMPTS")
    if max_attempts is None:
        max_attempts = DEFAULT_MAX_ATTEMPTS

    return GameSettings(secret=secret or None, max_attempts=max_attempts)


def resolve_seed(args: argparse.Namespace) -> Optional[int]:
    seed = parse_int(args.seed)
    if args.seed is not None and seed is None:
        print(f"Warning: ignoring --seed {args.seed!r} (not an integer)", file=sys.stderr)
    if seed is None:
        seed = env_int("MASTERMIND_SEED")
    return seed


def print_recap(result: GameResult):
    """Print the scored rounds of a finished game as a table."""
    print()
    if result.turns:
        table_data = [
            [turn.round_number, turn.guess, turn.well_placed, turn.misplaced]
            for turn in result.turns
        ]
        headers = ['Round', 'Guess', 'Well placed', 'Misplaced']
        print(tabulate(table_data, headers=headers, tablefmt='grid', disable_numparse=True))
    else:
        print("No scored rounds.")
    print(f"Outcome: {result.outcome} ({result.rounds} scored round(s), "
          f"{result.invalid_guesses} invalid guess(es))")


def main(argv: Optional[list[str]] = None):
    """Main CLI entry point."""
    load_dotenv()

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    # Unrecognized flags are ignored
    args, _ = parser.parse_known_args(drop_malformed_flags(argv))

    settings = resolve_settings(args, parser)
    seed = resolve_seed(args)
    generator = CodeGenerator(random.Random(seed))

    session = GameSession(settings, ConsolePlayer(), generator=generator)
    result = session.run()

    if args.verbose:
        print_recap(result)


if __name__ == '__main__':
    main()
