"""
Session Module - One play-through of the game.

A session:
- Is created with an answer picked from the word list
- Counts attempts and decides WON / LOST
- Is driven from the terminal by the GameLoop

Sessions are EPHEMERAL: nothing is kept after the game ends.
"""

from .manager import Session, SessionState, TurnResult, create_session
from .game_loop import GameLoop, LineReader

__all__ = [
    "Session",
    "SessionState",
    "TurnResult",
    "create_session",
    "GameLoop",
    "LineReader",
]
