"""
Bootstrap - First run setup of the data directory, habits file and log
"""
from pathlib import Path
from typing import Callable
import logging

import typer

from habitctl.core.config import Settings
from habitctl.core.exceptions import StorageError

logger = logging.getLogger(__name__)

EXAMPLE_HABITS = (
    "# The first number specifies how often you want to do a habit:\n"
    "# 1 means daily, 7 means weekly, 0 means you're just tracking the habit.\n"
    "# The second number is the highest value you can log for it, 1 for yes/no.\n"
    "# Some examples:\n"
    "\n"
    "# 1 1 Meditated\n"
    "# 7 1 Cleaned the apartment\n"
    "# 0 1 Had a headache\n"
    "# 1 5 Glasses of water\n"
    "# 1 1 Used habitctl\n"
)


def ensure_data_files(settings: Settings, echo: Callable[..., None] = typer.echo) -> None:
    """
    Create the data directory, habits file and log if they don't exist

    The example habits are appended when the log is created, so an existing
    habits file from an earlier install gets them only once.

    Raises:
        StorageError: If a directory or file can't be created
    """
    data_dir: Path = settings.HABITCTL_DIR
    try:
        if not data_dir.is_dir():
            echo("Welcome to habitctl!\n")
            data_dir.mkdir(parents=True)
            logger.info(f"Created data directory {data_dir}")

        habits_file = settings.habits_file
        if not habits_file.is_file():
            habits_file.touch()
            echo(f"Created {habits_file}. This file will list your currently tracked habits.")

        log_file = settings.log_file
        if not log_file.is_file():
            log_file.touch()
            with open(habits_file, "a", encoding="utf-8") as f:
                f.write(EXAMPLE_HABITS)
            echo(f"Created {log_file}. This file will contain your habit log.\n")
    except OSError as e:
        logger.error(f"Error setting up {data_dir}: {e}")
        raise StorageError(f"Failed to set up {data_dir}: {e}")
