from enum import Enum, IntEnum
from collections import Counter
import logging

logger = logging.getLogger(__name__)

WORD_SIZE = 5
MAX_TRIES = 6


class WordError(ValueError):
    """Raised when text cannot be turned into a Word."""


class GameOverError(RuntimeError):
    """Raised when a guess is submitted to a finished game."""


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def symbol(self):
        return self.name[0]

    @staticmethod
    def ordinal(seq):
        """Base-3 code of a feedback sequence, first position least significant."""
        return sum(d.value * (3 ** p) for p, d in enumerate(seq))


class Word:
    """An immutable, fixed-length sequence of uppercase letters."""

    __slots__ = ('_letters',)

    def __init__(self, letters, size=WORD_SIZE):
        letters = tuple(letters)
        if len(letters) != size:
            raise WordError(f"Word must be of size: {size}")
        for c in letters:
            if not (isinstance(c, str) and len(c) == 1 and c.isalpha() and c.isupper()):
                raise WordError(f"Not a word: {''.join(map(str, letters))}")
        object.__setattr__(self, '_letters', letters)

    @classmethod
    def parse(cls, text, size=WORD_SIZE):
        """Trim and uppercase ``text``, rejecting anything that isn't a word
        of exactly ``size`` alphabetic characters.
        """
        text = text.strip()
        if text and not text.isalpha():
            raise WordError(f"Not a word: {text}")
        if len(text) != size:
            raise WordError(f"Word must be of size: {size}")
        return cls(text.upper(), size=size)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self):
        return iter(self._letters)

    def __len__(self):
        return len(self._letters)

    def __getitem__(self, index):
        return self._letters[index]

    def __eq__(self, other):
        if isinstance(other, Word):
            return self._letters == other._letters
        return NotImplemented

    def __hash__(self):
        return hash(self._letters)

    def __lt__(self, other):
        if isinstance(other, Word):
            return self._letters < other._letters
        return NotImplemented

    def __str__(self):
        return ''.join(self._letters)

    def __repr__(self):
        return f"Word({str(self)!r})"


class ScoredLetter:
    __slots__ = ('letter', '_feedback')

    def __init__(self, letter, feedback=None):
        self.letter = letter
        self._feedback = feedback

    @property
    def feedback(self):
        return self._feedback

    @property
    def checked(self):
        return self._feedback is not None

    def set_feedback(self, feedback):
        if self._feedback is not None:
            raise ValueError(f"Feedback for {self.letter!r} already set to {self._feedback.name}")
        self._feedback = Feedback(feedback)

    def __eq__(self, other):
        if isinstance(other, ScoredLetter):
            return (self.letter, self._feedback) == (other.letter, other._feedback)
        return NotImplemented

    def __repr__(self):
        fb = self._feedback.name if self._feedback is not None else None
        return f"ScoredLetter({self.letter!r}, {fb})"


class ScoredWord:
    def __init__(self, letters):
        self.letters = tuple(letters)

    @classmethod
    def from_word(cls, word):
        return cls(ScoredLetter(c) for c in word)

    def __iter__(self):
        return iter(self.letters)

    def __len__(self):
        return len(self.letters)

    def __getitem__(self, index):
        return self.letters[index]

    def __eq__(self, other):
        if isinstance(other, ScoredWord):
            return self.letters == other.letters
        return NotImplemented

    @property
    def solved(self):
        return all(sl.feedback is Feedback.CORRECT for sl in self.letters)

    @property
    def feedback(self):
        return tuple(sl.feedback for sl in self.letters)

    @property
    def pattern(self):
        return ''.join(sl.feedback.symbol if sl.checked else '?' for sl in self.letters)

    @property
    def ordinal(self):
        return Feedback.ordinal(self.feedback)

    @property
    def word(self):
        return ''.join(sl.letter for sl in self.letters)

    def __str__(self):
        return self.word

    def __repr__(self):
        return f"ScoredWord({self.word!r}, {self.pattern!r})"


def evaluate(guess, target):
    """Score ``guess`` against ``target``.

    Exact matches are marked first and removed from the pool of target
    letters. The remaining guess letters then claim leftover target letters
    left to right, so a duplicated guess letter is only marked present as
    many times as the target still has it.
    """
    if len(guess) != len(target):
        raise ValueError("Guess and target must be the same length.")

    scored = ScoredWord.from_word(guess)
    leftover = Counter()

    for sl, t in zip(scored, target):
        if sl.letter == t:
            sl.set_feedback(Feedback.CORRECT)
        else:
            leftover[t] += 1

    for sl in scored:
        if sl.checked:
            continue
        if leftover[sl.letter] > 0:
            leftover[sl.letter] -= 1
            sl.set_feedback(Feedback.PRESENT)
        else:
            sl.set_feedback(Feedback.ABSENT)

    return scored


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class WordleGame:
    def __init__(self, target, max_attempts=MAX_TRIES):
        self.target = target
        self.max_attempts = max_attempts
        self.attempts = 0
        self.guesses = []
        self.results = []

    @property
    def tries_left(self):
        return self.max_attempts - self.attempts

    @property
    def solved(self):
        return bool(self.results) and self.results[-1].solved

    @property
    def status(self):
        if self.solved:
            return Status.WON
        elif self.attempts >= self.max_attempts:
            return Status.LOST
        return Status.PLAYING

    @property
    def over(self):
        return self.status is not Status.PLAYING

    def guess(self, word):
        if self.over:
            raise GameOverError(f"Game already finished: {self.status.value}")

        result = evaluate(word, self.target)
        self.attempts += 1
        self.guesses.append(word)
        self.results.append(result)
        logger.debug(f"guess {self.attempts}/{self.max_attempts}: {word} -> {result.pattern} ({result.ordinal})")

        if self.over:
            logger.info(f"game over ({self.status.value}) after {self.attempts} attempts")
        return result

