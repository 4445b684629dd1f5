"""
Game Loop - Drives a session from the terminal.

The loop:
1. Prompt with the attempts remaining
2. Read one line from the player
3. Report a rejected guess and prompt again, or
4. Print the hint for a scored guess
5. Repeat until the session is WON or LOST

End of input ends the session as LOST. A lost session reveals the
answer on the error stream.
"""

from __future__ import annotations
import logging
from typing import TextIO, TYPE_CHECKING

from . import messages
from .manager import SessionState

if TYPE_CHECKING:
    from .manager import Session, TurnResult

logger = logging.getLogger(__name__)


class LineReader:
    """
    Reads guesses one line at a time.

    read_line() returns (line, end_of_stream). The trailing newline is
    stripped. A last line without a newline is still returned as a line;
    end_of_stream is only reported once nothing is left to read.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def read_line(self) -> tuple[str, bool]:
        line = self.stream.readline()
        if line == "":
            return "", True
        if line.endswith("\n"):
            line = line[:-1]
        return line, False


class GameLoop:
    """
    The terminal game loop driver.

    Usage:
        loop = GameLoop(session, LineReader(sys.stdin), sys.stdout, sys.stderr)
        final_state = loop.run()
    """

    def __init__(
        self,
        session: Session,
        reader: LineReader,
        out: TextIO,
        err: TextIO,
    ):
        self.session = session
        self.reader = reader
        self.out = out
        self.err = err

    def run(self) -> SessionState:
        """Play the session to a terminal state and return it."""
        session = self.session
        self._say(messages.WELCOME)

        while session.is_active():
            self._say(self._prompt())

            line, end_of_stream = self.reader.read_line()
            if end_of_stream:
                session.end_of_input()
                break

            self._report(session.submit_guess(line))

        if session.state == SessionState.LOST:
            print(messages.reveal(session.answer), file=self.err, flush=True)

        logger.debug("Session finished: %s", session.state.value)
        return session.state

    def _prompt(self) -> str:
        session = self.session
        if session.is_last_attempt():
            return messages.last_attempt_prompt(session.word_length)
        return messages.prompt(session.word_length, session.attempts_remaining)

    def _report(self, result: TurnResult) -> None:
        if result.error:
            self._say(messages.guess_error(result.error, self.session.word_length))
        elif result.state == SessionState.WON:
            self._say(messages.CORRECT)
        elif result.hint is not None:
            self._say(result.hint)

    def _say(self, text: str) -> None:
        print(text, file=self.out, flush=True)
