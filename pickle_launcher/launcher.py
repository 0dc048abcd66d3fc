"""Launcher implementation."""

import logging
import os
import subprocess
import sys
from pathlib import Path

from pickle_launcher.config import load_config, read_config_text
from pickle_launcher.constants import (
    CONFIG_DUMP_FOOTER,
    DEFAULT_CONFIG_FILE,
    DEFAULT_PLAYER,
    DEFAULT_VIDEO_DIR,
    EXIT_OK,
    Step,
)
from pickle_launcher.errors import MissingVideoFile, PlayerLaunchFailed
from pickle_launcher.models import LaunchCommand, Playlist
from pickle_launcher.playlist import build_command, build_playlist

LOGGER = logging.getLogger(__name__)

# Only POSIX exec replaces the process image in place
CAN_REPLACE_PROCESS = os.name == 'posix'


class Launcher:
    """Turns the pickle config into a player invocation."""

    def __init__(
        self,
        config_file: Path = DEFAULT_CONFIG_FILE,
        video_dir: Path = DEFAULT_VIDEO_DIR,
        player: Path = DEFAULT_PLAYER,
    ):
        self.config_file = Path(config_file)
        self.video_dir = Path(video_dir)
        self.player = Path(player)
        self.step = Step.START

    @classmethod
    def from_settings(cls, settings) -> 'Launcher':
        return cls(settings.config_file, settings.video_dir, settings.player)

    @property
    def step(self):
        return self._step

    @step.setter
    def step(self, value):
        self._step = value
        LOGGER.debug("Step changed to %s", self.step)

    def run(self, debug: bool = False) -> int:
        """Run the launcher.

        In debug mode the config and the would-be command are printed and
        nothing is checked or started. Otherwise the process is handed over
        to the player, so this only returns where it cannot be replaced.

        Returns:
            The exit code for the launcher process.
        """
        try:
            self.step = Step.LOAD_CONFIG
            entries = load_config(self.config_file)

            self.step = Step.BUILD_PLAYLIST
            playlist = build_playlist(entries, self.video_dir, self.config_file)

            self.step = Step.BUILD_COMMAND
            command = build_command(self.player, playlist)

            # The config dump is only shown once the playlist is non-empty.
            if debug:
                self.step = Step.DEBUG_PRINT
                self._print_debug(command)
                self.step = Step.DONE
                return EXIT_OK

            self.step = Step.VALIDATE_FILES
            self._validate_files(playlist)

            self.step = Step.EXEC
            print("Starting Pickle with:")
            print(command.quoted())
            exit_code = self._hand_off(command)
            self.step = Step.DONE
            return exit_code
        except Exception:
            self.step = Step.FAILED
            raise

    def _print_debug(self, command: LaunchCommand) -> None:
        """Show the raw config and the command that would be run."""
        config_text = read_config_text(self.config_file)
        print(f"=== Contents of {self.config_file} ===")
        print(config_text, end='' if config_text.endswith('\n') else '\n')
        print(CONFIG_DUMP_FOOTER)
        print()
        print("DEBUG MODE: Pickle would start with:")
        print(command.quoted())

    @staticmethod
    def _validate_files(playlist: Playlist) -> None:
        """Make sure every playlist entry exists.

        Raises:
            MissingVideoFile: for the first path that is not a file.
        """
        for path in playlist:
            if not path.is_file():
                raise MissingVideoFile(path)
        LOGGER.info("All %d video files present", len(playlist))

    @staticmethod
    def _hand_off(command: LaunchCommand) -> int:
        """Replace this process with the player.

        Without exec support the player runs as a child with inherited
        stdio and its exit code is returned.
        """
        argv = command.argv
        LOGGER.info("Handing off to %s", ' '.join(argv))
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            if not CAN_REPLACE_PROCESS:
                return subprocess.call(argv)
            os.execvp(argv[0], argv)
        except OSError as e:
            raise PlayerLaunchFailed(command.executable, e.strerror or str(e)) from e
        return EXIT_OK
