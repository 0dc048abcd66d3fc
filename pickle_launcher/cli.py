"""Command line entry point."""

import logging
import sys
from typing import List, Optional

from pickle_launcher.config import SettingsManager
from pickle_launcher.constants import DEBUG_FLAG, LOG_FORMAT
from pickle_launcher.errors import LauncherError
from pickle_launcher.launcher import Launcher

LOGGER = logging.getLogger(__name__)


def is_debug(argv: List[str]) -> bool:
    """Only an exact ``--debug`` as first argument turns on debug mode."""
    return bool(argv) and argv[0] == DEBUG_FLAG


def setup_logging(level: int) -> None:
    # Logs go to stderr; stdout is for the config dump and command line.
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)


def main(argv: Optional[List[str]] = None, settings: Optional[SettingsManager] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = SettingsManager()
        settings.load()
    setup_logging(settings.logging_level)

    launcher = Launcher.from_settings(settings)
    try:
        return launcher.run(debug=is_debug(argv))
    except LauncherError as e:
        LOGGER.debug("Launcher failed at step %s", launcher.step)
        print(f"ERROR: {e.message}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        LOGGER.info("Interrupted by user")
        return 130
