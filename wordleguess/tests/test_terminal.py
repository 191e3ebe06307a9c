import io
import logging
import unittest

from ..terminal import Renderer, Style, read_word, BOLD, DIM, ITALIC, RESET
from ..wordle_game import Word, ScoredWord, evaluate

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def scripted(*lines):
    """Stand-in for input() that replays ``lines`` and records prompts."""
    answers = iter(lines)
    prompts = []

    def prompt_fn(prompt):
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    prompt_fn.prompts = prompts
    return prompt_fn


class TestReadWord(unittest.TestCase):

    def test_accepts_valid(self):
        prompt_fn = scripted("  crane ")
        err = io.StringIO()
        self.assertEqual(read_word(prompt_fn, err), Word("CRANE"))
        self.assertEqual(prompt_fn.prompts, ["Enter a 5-letter word: "])
        self.assertEqual(err.getvalue(), "")

    def test_reprompts_until_valid(self):
        prompt_fn = scripted("cr4ne", "cran", "", "cranes", "Slate")
        err = io.StringIO()
        self.assertEqual(read_word(prompt_fn, err), Word("SLATE"))
        self.assertEqual(len(prompt_fn.prompts), 5)
        self.assertEqual(err.getvalue().splitlines(), [
            "Not a word: cr4ne",
            "Word must be of size: 5",
            "Word must be of size: 5",
            "Word must be of size: 5",
        ])

    def test_eof_propagates(self):
        self.assertRaises(EOFError, read_word, scripted("xx"), io.StringIO())


class TestRenderer(unittest.TestCase):

    def test_styled(self):
        result = evaluate(Word("SPEED"), Word("ABIDE"))
        rendered = Renderer().render(result)
        expected = (f"{DIM}S{RESET}{DIM}P{RESET}{ITALIC}E{RESET}"
                    f"{DIM}E{RESET}{ITALIC}D{RESET}")
        self.assertEqual(rendered, expected)

    def test_solved_is_bold(self):
        rendered = Renderer().render(evaluate(Word("CRANE"), Word("CRANE")))
        self.assertEqual(rendered, "".join(f"{BOLD}{c}{RESET}" for c in "CRANE"))

    def test_custom_style(self):
        style = Style(correct="<c>", present="<p>", absent="<a>", reset="</>")
        rendered = Renderer(style).render(evaluate(Word("REACT"), Word("CRANE")))
        self.assertEqual(rendered, "<p>R</><p>E</><c>A</><p>C</><a>T</>")

    def test_unscored_letters_plain(self):
        self.assertEqual(Renderer().render(ScoredWord.from_word(Word("CRANE"))), "CRANE")

    def test_plain(self):
        rendered = Renderer(color=False).render(evaluate(Word("SPEED"), Word("ABIDE")))
        self.assertEqual(rendered, "SPEED AAPAP")


if __name__ == '__main__':
    unittest.main()
