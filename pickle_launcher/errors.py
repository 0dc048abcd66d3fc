"""Launcher errors.

Every error is terminal; ``cli.main`` maps it to its exit code.
"""

from pathlib import Path

from pickle_launcher.constants import EXIT_FAILURE, EXIT_NOT_FOUND


class LauncherError(Exception):
    """Base class for launcher failures."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigNotFound(LauncherError):
    """The pickle config file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Config file not found: {path}")
        self.path = path


class NoVideosEnabled(LauncherError):
    """The config has no video*=yes entries."""

    def __init__(self, path: Path):
        super().__init__(
            f"No videos enabled in {Path(path).name} (no video*=yes entries found)"
        )
        self.path = path


class MissingVideoFile(LauncherError):
    """A playlist file is missing on disk."""

    def __init__(self, path: Path):
        super().__init__(f"Missing video file: {path}")
        self.path = path


class PlayerLaunchFailed(LauncherError):
    """The player executable could not be started."""

    exit_code = EXIT_NOT_FOUND

    def __init__(self, executable: Path, reason: str):
        super().__init__(f"Failed to start player {executable}: {reason}")
        self.executable = executable


class ConfigUnreadable(LauncherError):
    """The pickle config file exists but cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read config file {path}: {reason}")
        self.path = path
