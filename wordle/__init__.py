"""
Wordle - Terminal word-guessing game.

A hidden answer word is picked from a dictionary and the player has a
bounded number of attempts to find it. The package provides:
- Guess scoring (correct / present elsewhere / absent)
- The game session state machine
- Dictionary loading and answer selection
- A command-line entry point
"""

__version__ = "0.1.0"
