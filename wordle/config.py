"""
Game Configuration - Validated settings for one run of the game.

Values come from the command line, with defaults from the environment:
- WORDLE_DICT: dictionary file (default /usr/share/dict/words)
- WORDLE_SEED: integer seed for answer selection (default: unseeded)
- WORDLE_LOG_LEVEL: logging level (default WARNING)
"""

from __future__ import annotations
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6
DEFAULT_DICTIONARY = "/usr/share/dict/words"
DEFAULT_LOG_LEVEL = "WARNING"

MIN_ARGUMENT = 3
MAX_ARGUMENT = 9

# Settings that fall back to the environment, by field name
ENVIRONMENT_VARIABLES = {
    "dictionary": "WORDLE_DICT",
    "seed": "WORDLE_SEED",
    "log_level": "WORDLE_LOG_LEVEL",
}


class GameConfig(BaseModel):
    """Settings for a game, validated on construction."""
    word_length: int = Field(
        default=DEFAULT_WORD_LENGTH, ge=MIN_ARGUMENT, le=MAX_ARGUMENT,
        description="Letters per word",
    )
    # The command line accepts 3-9; Session itself allows any budget >= 1
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS, ge=MIN_ARGUMENT, le=MAX_ARGUMENT,
        description="Scored guesses allowed before the game is lost",
    )
    dictionary: str = Field(default=DEFAULT_DICTIONARY, min_length=1)
    seed: Optional[int] = Field(default=None, description="Seed for answer selection")
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    model_config = {"frozen": True}


def load_config(
    word_length: int | None = None,
    max_attempts: int | None = None,
    dictionary: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> GameConfig:
    """
    Build a GameConfig from explicit values and environment defaults.

    Explicit values win over the environment. Raises
    pydantic.ValidationError if any value is out of range.
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {
        "dictionary": env.get("WORDLE_DICT", DEFAULT_DICTIONARY),
        "log_level": env.get("WORDLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    }
    if env.get("WORDLE_SEED"):
        values["seed"] = env["WORDLE_SEED"]

    if word_length is not None:
        values["word_length"] = word_length
    if max_attempts is not None:
        values["max_attempts"] = max_attempts
    if dictionary is not None:
        values["dictionary"] = dictionary

    return GameConfig(**values)
