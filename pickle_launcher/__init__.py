"""Package initialization."""

from pickle_launcher.config import SettingsManager, load_config, parse_config
from pickle_launcher.constants import Step
from pickle_launcher.errors import (
    ConfigNotFound,
    ConfigUnreadable,
    LauncherError,
    MissingVideoFile,
    NoVideosEnabled,
    PlayerLaunchFailed,
)
from pickle_launcher.launcher import Launcher
from pickle_launcher.models import ConfigEntry, LaunchCommand, Playlist
from pickle_launcher.playlist import build_command, build_playlist

__all__ = [
    'SettingsManager',
    'load_config',
    'parse_config',
    'Step',
    'ConfigNotFound',
    'ConfigUnreadable',
    'LauncherError',
    'MissingVideoFile',
    'NoVideosEnabled',
    'PlayerLaunchFailed',
    'Launcher',
    'ConfigEntry',
    'LaunchCommand',
    'Playlist',
    'build_command',
    'build_playlist',
]
