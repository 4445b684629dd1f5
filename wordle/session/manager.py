"""
Session - The state machine for one play-through.

LIFECYCLE:
1. An answer is picked from the word list
2. The session starts ACTIVE with `max_attempts` attempts remaining
3. Each guess is validated:
   - Rejected guesses are reported and cost nothing
   - A correct guess ends the session as WON
   - Any other valid guess is scored and costs one attempt
4. The session ends as LOST when attempts run out or input ends

WON and LOST are terminal. Nothing leaves a terminal state.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from ..dictionary import WordList, choose_answer
from ..engine_core.scorer import score
from ..engine_core.validation import GuessError, validate_guess, is_word

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    WON = "won"  # Answer guessed
    LOST = "lost"  # Attempts exhausted or input ended


@dataclass
class TurnResult:
    """
    Result of one guess (or of the input ending).

    A rejected guess has accepted=False and an error; the session
    state is unchanged. An accepted, incorrect guess carries its hint.
    """
    accepted: bool
    state: SessionState
    attempts_remaining: int
    guess: str | None = None
    hint: str | None = None
    error: GuessError | None = None


@dataclass
class Session:
    """
    One game of Wordle.

    The answer is fixed for the lifetime of the session.
    """
    answer: str
    words: WordList
    max_attempts: int

    state: SessionState = field(default=SessionState.ACTIVE, init=False)
    attempts_remaining: int = field(init=False)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if not is_word(self.answer):
            raise ValueError(f"Answer must be an alphabetic word: {self.answer!r}")
        self.attempts_remaining = self.max_attempts

    @property
    def word_length(self) -> int:
        return len(self.answer)

    def is_active(self) -> bool:
        """Check if the session still accepts guesses."""
        return self.state == SessionState.ACTIVE

    def is_last_attempt(self) -> bool:
        return self.attempts_remaining == 1

    def submit_guess(self, guess: str) -> TurnResult:
        """
        Play one guess.

        Raises ValueError if the session is already over.
        """
        self._require_active()

        error = validate_guess(guess, self.word_length, self.words)
        if error:
            logger.debug("Rejected guess %r: %s", guess, error.value)
            return self._result(accepted=False, guess=guess, error=error)

        if guess.lower() == self.answer.lower():
            self.state = SessionState.WON
            logger.debug("Guess %r solved the session", guess)
            return self._result(accepted=True, guess=guess)

        hint = score(guess, self.answer)
        self.attempts_remaining -= 1
        if self.attempts_remaining == 0:
            self.state = SessionState.LOST
        logger.debug(
            "Guess %r scored %s, %d attempt(s) remaining",
            guess, hint, self.attempts_remaining,
        )
        return self._result(accepted=True, guess=guess, hint=hint)

    def end_of_input(self) -> TurnResult:
        """
        Resolve the session as lost because input ended.

        Applies regardless of how many attempts remain.
        """
        self._require_active()
        self.state = SessionState.LOST
        logger.debug(
            "Input ended with %d attempt(s) remaining", self.attempts_remaining
        )
        return self._result(accepted=False)

    def _require_active(self) -> None:
        if not self.is_active():
            raise ValueError(f"Session is over ({self.state.value}) - no further guesses")

    def _result(self, accepted: bool, **kwargs) -> TurnResult:
        return TurnResult(
            accepted=accepted,
            state=self.state,
            attempts_remaining=self.attempts_remaining,
            **kwargs,
        )


def create_session(
    words: WordList,
    max_attempts: int,
    rng: random.Random | None = None,
) -> Session:
    """
    Start a session with an answer picked from `words`.

    Raises DictionaryError if `words` is empty.
    """
    answer = choose_answer(words, rng or random.Random())
    logger.debug("Created session: %d letters, %d attempts", len(answer), max_attempts)
    return Session(answer=answer, words=words, max_attempts=max_attempts)
