# wordleguess/__init__.py
"""
WordLeGuess: a terminal Wordle game.
"""

__version__ = "0.1.0"

from .wordle_game import (Feedback, Word, ScoredLetter, ScoredWord, WordleGame,
    Status, WordError, GameOverError, evaluate, WORD_SIZE, MAX_TRIES
)
from .word_source import WordSource, WordSourceError

__all__ = [
    "Feedback",
    "Word",
    "ScoredLetter",
    "ScoredWord",
    "WordleGame",
    "Status",
    "WordError",
    "GameOverError",
    "WordSource",
    "WordSourceError",
    "evaluate",
    "WORD_SIZE",
    "MAX_TRIES",
]
