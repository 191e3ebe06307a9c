import sys
import logging
from dataclasses import dataclass

from .wordle_game import Feedback, Word, WordError, WORD_SIZE

logger = logging.getLogger(__name__)

BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
RESET = "\x1b[0m"


def read_word(prompt_fn=None, err=None, word_length=WORD_SIZE):
    """Prompt until a valid word is entered.

    EOFError and KeyboardInterrupt from ``prompt_fn`` are left for the
    caller.
    """
    prompt_fn = prompt_fn if prompt_fn is not None else input
    err = err if err is not None else sys.stderr
    while True:
        line = prompt_fn(f"Enter a {word_length}-letter word: ")
        try:
            return Word.parse(line, size=word_length)
        except WordError as e:
            logger.debug(f"rejected input {line.strip()!r}: {e}")
            print(e, file=err)


@dataclass(frozen=True)
class Style:
    correct: str = BOLD
    present: str = ITALIC
    absent: str = DIM
    reset: str = RESET

    def code_for(self, feedback):
        return {
            Feedback.CORRECT: self.correct,
            Feedback.PRESENT: self.present,
            Feedback.ABSENT: self.absent,
        }[feedback]


class Renderer:
    def __init__(self, style=None, color=True):
        self.style = style if style is not None else Style()
        self.color = color

    def render_letter(self, scored_letter):
        if not scored_letter.checked:
            return scored_letter.letter
        return f"{self.style.code_for(scored_letter.feedback)}{scored_letter.letter}{self.style.reset}"

    def render(self, scored_word):
        if not self.color:
            return f"{scored_word.word} {scored_word.pattern}"
        return ''.join(self.render_letter(sl) for sl in scored_word)
