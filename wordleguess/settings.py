from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from PyQt6.QtCore import QSettings

from .terminal import Style

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class GameSettings:
    words_file: Optional[Path] = None  # None selects the bundled list
    color: bool = True
    style: Style = field(default_factory=Style)
    seed: Optional[int] = None  # never persisted
    log_level: str = 'WARNING'


def _to_bool(value, default):
    # QSettings hands back strings for INI/native storage
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def load_settings(settings=None):
    """Build a GameSettings from stored values, using defaults where a key
    is missing or unusable."""
    settings = settings if settings is not None else QSettings()
    defaults = GameSettings()

    words_file = settings.value("words_file", None)
    words_file = Path(words_file) if words_file else None

    log_level = str(settings.value("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        logger.warning(f"Ignoring unknown stored log level {log_level!r}")
        log_level = defaults.log_level

    settings.beginGroup("style")
    style = Style(
        correct=settings.value("correct", defaults.style.correct),
        present=settings.value("present", defaults.style.present),
        absent=settings.value("absent", defaults.style.absent),
        reset=settings.value("reset", defaults.style.reset),
    )
    settings.endGroup()

    game_settings = GameSettings(
        words_file=words_file,
        color=_to_bool(settings.value("color", None), defaults.color),
        style=style,
        log_level=log_level,
    )
    logger.debug(f"Loaded settings: {game_settings}")
    return game_settings


def save_settings(game_settings, settings=None):
    settings = settings if settings is not None else QSettings()
    if game_settings.words_file is not None:
        settings.setValue("words_file", str(game_settings.words_file))
    else:
        settings.remove("words_file")
    settings.setValue("color", game_settings.color)
    settings.setValue("log_level", game_settings.log_level)

    settings.beginGroup("style")
    settings.setValue("correct", game_settings.style.correct)
    settings.setValue("present", game_settings.style.present)
    settings.setValue("absent", game_settings.style.absent)
    settings.setValue("reset", game_settings.style.reset)
    settings.endGroup()
    settings.sync()
    logger.debug(f"Saved settings to {settings.fileName()}")
