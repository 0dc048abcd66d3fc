"""Playlist and player command construction."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from pickle_launcher.constants import (
    ENABLED_VALUE,
    HW_FLAG,
    HW_MIN_VIDEOS,
    LIST_FLAG,
    VIDEO_EXTENSION,
    VIDEO_KEY_PREFIX,
)
from pickle_launcher.errors import NoVideosEnabled
from pickle_launcher.models import ConfigEntry, LaunchCommand, Playlist

LOGGER = logging.getLogger(__name__)


def is_enabled(entry: ConfigEntry) -> bool:
    """Check if an entry is a video*=yes line."""
    return entry.key.startswith(VIDEO_KEY_PREFIX) and entry.value == ENABLED_VALUE


def build_playlist(
    entries: Iterable[ConfigEntry],
    media_dir: Path,
    config_file: Optional[Path] = None,
) -> Playlist:
    """Map every enabled entry to ``media_dir/<key>.mp4``, in order.

    Args:
        entries: Parsed config entries.
        media_dir: Directory holding the video files.
        config_file: Config path, only used in the error message.

    Raises:
        NoVideosEnabled: if no entry is enabled.
    """
    media_dir = Path(media_dir)
    playlist = Playlist()
    for entry in entries:
        if not is_enabled(entry):
            continue
        path = media_dir / f"{entry.key}{VIDEO_EXTENSION}"
        LOGGER.debug("Line %d enables %s", entry.line_number, path)
        playlist.paths.append(path)

    if not playlist:
        raise NoVideosEnabled(config_file or Path('pickle.conf'))

    LOGGER.info("Playlist has %d videos", len(playlist))
    return playlist


def build_command(executable: Path, playlist: Playlist) -> LaunchCommand:
    """Build the player command line for a playlist."""
    flags = [LIST_FLAG]
    if len(playlist) >= HW_MIN_VIDEOS:
        flags.append(HW_FLAG)
    return LaunchCommand(Path(executable), flags, playlist)
