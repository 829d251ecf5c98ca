"""
Dependency wiring for the session and its files
"""
from typing import Optional

from habitctl.core.config import Settings, get_settings
from habitctl.services.bootstrap import ensure_data_files
from habitctl.services.habits.session import HabitSession


def get_session(settings: Optional[Settings] = None) -> HabitSession:
    """Create missing data files, then load a session from them"""
    settings = settings or get_settings()
    ensure_data_files(settings)
    return HabitSession(settings.habits_file, settings.log_file).reload()
