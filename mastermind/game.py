"""Core Mastermind game logic."""

from collections import Counter
from dataclasses import dataclass
from typing import NamedTuple, Optional
import random


ALPHABET = "012345678"  # 9 pieces
CODE_LENGTH = 4  # 4 distinct pieces
DEFAULT_MAX_ATTEMPTS = 10

Code = str


class MastermindError(Exception):
    """Base exception for game-related issues."""
    pass


class InvalidInputError(MastermindError):
    """Raised when a code or guess breaks the game rules."""
    pass


@dataclass
class GameSettings:
    """Configuration for a Mastermind game."""
    secret: Optional[Code] = None  # None or "" = generate one
    max_attempts: int = DEFAULT_MAX_ATTEMPTS  # <= 0 ends the game before the first round


class ScoreResult(NamedTuple):
    """Feedback for one guess."""
    well_placed: int
    misplaced: int


class CodeGenerator:
    """Draws secret codes from the alphabet without replacement."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a code generator.

        Args:
            rng: Random source. If None, a fresh unseeded one is used.
        """
        self.rng = rng if rng is not None else random.Random()

    def generate(self) -> Code:
        """Generate a random code of distinct symbols."""
        available = list(ALPHABET)
        code = []
        for _ in range(CODE_LENGTH):
            index = self.rng.randrange(len(available))
            code.append(available.pop(index))
        return "".join(code)


def score(secret: Code, guess: Code) -> ScoreResult:
    """
    Calculate well-placed and misplaced pieces using standard Mastermind rules.

    Algorithm:
    1. Count exact position matches (well placed)
    2. Drop matched positions from both sequences
    3. For remaining positions, each symbol counts min(guess, secret) times

    Returns:
        ScoreResult(well_placed, misplaced)

    Raises:
        InvalidInputError: secret and guess have different lengths
    """
    if len(secret) != len(guess):
        raise InvalidInputError(
            f"Secret and guess must be the same length ({len(secret)} != {len(guess)})"
        )

    well_placed = 0
    secret_remaining = Counter()
    guess_remaining = Counter()

    for secret_symbol, guess_symbol in zip(secret, guess):
        if secret_symbol == guess_symbol:
            well_placed += 1
        else:
            secret_remaining[secret_symbol] += 1
            guess_remaining[guess_symbol] += 1

    misplaced = 0
    for symbol, count in guess_remaining.items():
        misplaced += min(count, secret_remaining[symbol])

    return ScoreResult(well_placed, misplaced)


def validate_guess(guess: Optional[str]) -> Optional[str]:
    """Validate guess format and values. Returns error message or None."""
    if not guess:
        return "Guess must not be empty"

    if len(guess) != CODE_LENGTH:
        return f"Guess must have exactly {CODE_LENGTH} pieces"

    if not all(symbol in ALPHABET for symbol in guess):
        return f"All pieces must be between {ALPHABET[0]} and {ALPHABET[-1]}"

    if len(set(guess)) != len(guess):
        return "Duplicate pieces not allowed"

    return None


def is_valid_guess(guess: Optional[str]) -> bool:
    """Return True if the guess is 4 distinct digits from 0-8."""
    return validate_guess(guess) is None


def validate_code(code: str, strict: bool = True) -> bool:
    """
    Validate a caller-supplied secret with the same rules as guesses.

    Args:
        code: The secret to check.
        strict: If True, raise InvalidInputError on failure instead of
            returning False.
    """
    error = validate_guess(code)
    if error is None:
        return True
    if strict:
        raise InvalidInputError(f"Invalid secret code {code!r}: {error}")
    return False
