"""Constants and enums for the pickle launcher."""

from enum import Enum
from pathlib import Path


class Step(str, Enum):
    """Launcher steps."""
    START = 'start'
    LOAD_CONFIG = 'load_config'
    BUILD_PLAYLIST = 'build_playlist'
    BUILD_COMMAND = 'build_command'
    DEBUG_PRINT = 'debug_print'
    VALIDATE_FILES = 'validate_files'
    EXEC = 'exec'
    DONE = 'done'
    FAILED = 'failed'


# Default locations
DEFAULT_CONFIG_FILE = Path.home() / 'pickle.conf'
DEFAULT_VIDEO_DIR = Path.home() / 'Video'
DEFAULT_PLAYER = Path.home() / 'pickle'
SETTINGS_FILE = Path.home() / '.config' / 'pickle' / 'launcher.yaml'
DEFAULT_LOG_LEVEL = 'WARNING'

# Playlist naming convention
VIDEO_KEY_PREFIX = 'video'
VIDEO_EXTENSION = '.mp4'
ENABLED_VALUE = 'yes'

# Player argument convention
LIST_FLAG = '-l'
HW_FLAG = '--hw'
HW_MIN_VIDEOS = 2

DEBUG_FLAG = '--debug'

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127

CONFIG_DUMP_FOOTER = '=========================='
LOG_FORMAT = '%(name)s[%(process)d]: %(levelname)s: %(message)s'
