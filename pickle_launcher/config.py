"""Configuration management."""

import logging
from pathlib import Path
from typing import List, Optional

import yaml

from pickle_launcher.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PLAYER,
    DEFAULT_VIDEO_DIR,
    SETTINGS_FILE,
)
from pickle_launcher.errors import ConfigNotFound, ConfigUnreadable
from pickle_launcher.models import ConfigEntry

LOGGER = logging.getLogger(__name__)


def read_config_text(path: Path) -> str:
    """Read the whole pickle config file.

    Bytes that are not UTF-8 are replaced, so such lines never match.

    Raises:
        ConfigNotFound: if no regular file exists at ``path``.
        ConfigUnreadable: if the file exists but cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFound(path)
    try:
        with open(path, encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError as e:
        raise ConfigUnreadable(path, e.strerror or str(e)) from e


def parse_config(text: str) -> List[ConfigEntry]:
    """Parse ``key=value`` lines, splitting on the first ``=``.

    Lines without ``=`` are skipped. Duplicate keys are kept in order.
    """
    entries = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        key, sep, value = line.partition('=')
        if not sep:
            if line.strip():
                LOGGER.debug("Skipping line %d without '=': %r", line_number, line)
            continue
        entries.append(ConfigEntry(key.strip(), value.strip(), line_number))
    return entries


def load_config(path: Path) -> List[ConfigEntry]:
    """Load the ordered entries of the pickle config file."""
    entries = parse_config(read_config_text(path))
    LOGGER.info("Loaded %d entries from %s", len(entries), path)
    return entries


class SettingsManager:
    """Manages the optional launcher settings file."""

    def __init__(self, settings_file: Optional[Path] = None):
        self.settings_file = Path(settings_file) if settings_file else SETTINGS_FILE
        self.log_level = DEFAULT_LOG_LEVEL
        self.config_file = DEFAULT_CONFIG_FILE
        self.video_dir = DEFAULT_VIDEO_DIR
        self.player = DEFAULT_PLAYER

    def load(self) -> bool:
        """Load settings from the YAML file.

        A missing file leaves the defaults in place and counts as success.

        Returns:
            True if successful, False otherwise.
        """
        try:
            with open(self.settings_file) as f:
                settings = yaml.safe_load(f)
        except FileNotFoundError:
            LOGGER.debug("No settings file at %s, using defaults", self.settings_file)
            return True
        except (OSError, yaml.YAMLError) as e:
            LOGGER.error("Failed to load settings %s: %s", self.settings_file, e)
            return False

        if not isinstance(settings, dict):
            LOGGER.error("Settings file is empty or not a mapping: %s", self.settings_file)
            return False

        self.log_level = str(settings.get('LogLevel', self.log_level)).upper()
        self.config_file = self._path(settings, 'ConfigFile', self.config_file)
        self.video_dir = self._path(settings, 'VideoDir', self.video_dir)
        self.player = self._path(settings, 'Player', self.player)

        LOGGER.info("Settings loaded from %s", self.settings_file)
        return True

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @staticmethod
    def _path(settings: dict, key: str, default: Path) -> Path:
        value = settings.get(key)
        if not value:
            return default
        return Path(str(value)).expanduser()
