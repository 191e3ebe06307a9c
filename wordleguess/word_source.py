import logging
from importlib.resources import files
from pathlib import Path

import numpy as np

from .wordle_game import Word, WordError, WORD_SIZE

logger = logging.getLogger(__name__)


class WordSourceError(Exception):
    """Raised when no target word can be provided."""


def default_words_path(resource='words.txt', package='wordleguess.data'):
    """Path of the word list bundled with the package."""
    return Path(files(package) / resource)


def load_word_list(filename, word_length=WORD_SIZE):
    """Read ``filename`` and return (words, skipped), skipping lines that
    aren't a valid word of ``word_length`` letters.
    """
    words = set()
    skipped = 0
    with open(filename, encoding='utf-8') as f:
        for line in f:
            if not line.strip():
                continue
            try:
                words.add(str(Word.parse(line, size=word_length)))
            except WordError:
                skipped += 1
    return words, skipped


class WordSource:
    def __init__(self, words, seed=None, word_length=WORD_SIZE):
        self.word_length = word_length
        self._words = np.unique(np.array([str(w) for w in words], dtype=f'<U{word_length}'))
        self.rng = np.random.default_rng(seed)

    @classmethod
    def from_file(cls, filename=None, seed=None, word_length=WORD_SIZE):
        if filename is None:
            filename = default_words_path()
        try:
            words, skipped = load_word_list(filename, word_length)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Unable to read word list {filename}: {e}")
            raise WordSourceError("Could not read words file.") from e

        logger.info(f"Loaded {len(words)} words from {filename}")
        if skipped:
            logger.debug(f"Skipped {skipped} invalid lines in {filename}")
        return cls(words, seed=seed, word_length=word_length)

    @property
    def words(self):
        return tuple(Word(w, size=self.word_length) for w in self._words)

    def __len__(self):
        return len(self._words)

    def __contains__(self, word):
        word = str(word).upper()
        idx = np.searchsorted(self._words, word)
        return bool(idx < len(self._words) and self._words[idx] == word)

    def random_word(self):
        if not len(self._words):
            raise WordSourceError("No word found.")
        word = self._words[self.rng.integers(len(self._words))]
        logger.debug(f"Selected target word from {len(self._words)} candidates")
        return Word(str(word), size=self.word_length)
