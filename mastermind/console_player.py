"""Line-oriented input for a human player at the console."""

import sys
from typing import Optional, TextIO


class ConsolePlayer:
    """Player that types guesses on standard input."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console player.

        Args:
            stream: Text stream to read guesses from. Defaults to sys.stdin.
        """
        self.stream = stream

    def get_next_guess(self) -> Optional[str]:
        """
        Read one guess.

        Returns:
            The line without its terminator, or None once the stream is
            exhausted (Ctrl+D).
        """
        stream = self.stream if self.stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")
