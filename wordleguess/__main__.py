import os
import sys
import logging
from argparse import ArgumentParser
from pathlib import Path

from PyQt6.QtCore import QCoreApplication

from .lazy_handler import LazyRotatingFileHandler
from .settings import load_settings, save_settings, LOG_LEVELS
from .terminal import Renderer, read_word
from .word_source import WordSource, WordSourceError
from .wordle_game import WordleGame, Status

logger = logging.getLogger(__name__)

QCoreApplication.setApplicationName('WordLeGuess')
QCoreApplication.setOrganizationName('moltencrux')


def setup_logger(prefix, name=None, level=logging.WARNING):
    pid = os.getpid()
    log_file = f"log_{pid}.log"
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    handler = LazyRotatingFileHandler(tmpdir_prefix=prefix + '.', basename=log_file, maxBytes=10*(1024 ** 2), backupCount=3)
    handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s'))
    logger.addHandler(handler)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)
    return logger


def parse_arguments(argv=None):
    parser = ArgumentParser(prog='wordleguess', description="Guess the hidden five-letter word in six tries")
    parser.add_argument(
        "-w", "--words", type=Path, default=None, help="Path to a word list, one word per line (optional)"
    )
    parser.add_argument("--no-color", action="store_true", default=False, help="Print feedback as plain letter codes")
    parser.add_argument("--seed", type=int, default=None, help="Seed for picking the hidden word")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Minimum level of log messages shown on stderr")
    parser.add_argument("--save-settings", action="store_true", default=False,
                        help="Remember the given options for later games")
    return parser.parse_args(argv)


def play(game, read=read_word, out=None, renderer=None):
    """Run turns until ``game`` is won or out of attempts."""
    out = out if out is not None else sys.stdout
    renderer = renderer if renderer is not None else Renderer()

    while not game.over:
        result = game.guess(read())
        print(renderer.render(result), file=out)

        if result.solved:
            print("Congrats, you won!", file=out)
            break

        print(f"Tries left: {game.tries_left}", file=out)

    if game.status is Status.LOST:
        print("You lost!", file=out)
        print(f"The word was: {game.target}", file=out)

    return game.status


def main(argv=None, settings=None):
    args = parse_arguments(argv)
    game_settings = load_settings(settings)

    if args.words is not None:
        game_settings.words_file = args.words
    if args.no_color:
        game_settings.color = False
    if args.log_level is not None:
        game_settings.log_level = args.log_level
    game_settings.seed = args.seed

    setup_logger('wordleguess', 'wordleguess', level=getattr(logging, game_settings.log_level))
    logger.debug('__main__.py: starting')

    if args.save_settings:
        save_settings(game_settings, settings)

    try:
        source = WordSource.from_file(game_settings.words_file, seed=game_settings.seed)
        target = source.random_word()
    except WordSourceError as e:
        print(e, file=sys.stderr)
        return 1

    game = WordleGame(target)
    renderer = Renderer(game_settings.style, color=game_settings.color)

    try:
        status = play(game, renderer=renderer)
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info(f"game abandoned after {game.attempts} attempts")
        return 130

    logger.info(f"game finished: {status.value}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
