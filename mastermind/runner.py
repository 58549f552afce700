"""Game session management and result tracking."""

from dataclasses import dataclass, field
from typing import Optional, TextIO
import sys

from .game import CodeGenerator, GameSettings, is_valid_guess, score


@dataclass
class TurnRecord:
    """One scored, non-winning round."""
    round_number: int
    guess: str
    well_placed: int
    misplaced: int


@dataclass
class GameResult:
    """Complete result of a game session."""
    secret: str
    outcome: str  # "win" | "loss" | "abandoned"
    rounds: int
    turns: list[TurnRecord] = field(default_factory=list)
    invalid_guesses: int = 0


class GameSession:
    """Runs the turn loop for a single game against one player."""

    def __init__(self, settings: GameSettings, player, out: Optional[TextIO] = None,
                 generator: Optional[CodeGenerator] = None):
        """
        Initialize game session.

        Args:
            settings: Game settings
            player: Object with get_next_guess() -> str | None (None = end of input)
            out: Text stream for game output. Defaults to sys.stdout.
            generator: Code generator used when settings carry no secret
        """
        self.settings = settings
        self.player = player
        self.out = out if out is not None else sys.stdout
        self.current_round = 0
        self.turns = []
        self.invalid_guesses = 0

        if settings.secret:
            self.secret = settings.secret
        else:
            generator = generator if generator is not None else CodeGenerator()
            self.secret = generator.generate()

    def run(self) -> GameResult:
        """Play until win, exhausted attempts or end of input."""
        self._write("Can you break the code? Enter a valid guess.")
        outcome = "loss"

        while self.current_round < self.settings.max_attempts:
            self._write("---")
            self._write(f"Round {self.current_round}")
            self._write(">", end="")
            self.out.flush()

            guess = self.player.get_next_guess()
            if guess is None:
                outcome = "abandoned"
                break

            if not is_valid_guess(guess):
                self.invalid_guesses += 1
                self._write("Wrong input!")
                continue

            if guess == self.secret:
                self._write("Congratz! You did it!")
                return self._result("win")

            self._play_turn(guess)

        self._write(f"Game over! The secret code was: {self.secret}")
        return self._result(outcome)

    def _play_turn(self, guess: str):
        """Score a valid, non-winning guess and advance the round."""
        well_placed, misplaced = score(self.secret, guess)
        self._write(f"Well placed pieces: {well_placed}")
        self._write(f"Misplaced pieces: {misplaced}")
        self.turns.append(TurnRecord(self.current_round, guess, well_placed, misplaced))
        self.current_round += 1

    def _write(self, text: str, end: str = "\n"):
        print(text, end=end, file=self.out)

    def _result(self, outcome: str) -> GameResult:
        return GameResult(
            secret=self.secret,
            outcome=outcome,
            rounds=self.current_round,
            turns=list(self.turns),
            invalid_guesses=self.invalid_guesses,
        )
