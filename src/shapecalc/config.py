"""
Configuration
=============
Central registry for package-level settings.

Exports:
    LOG_LEVEL (int): Default level used by ``setup_logging`` when the caller
        passes none. Read from the ``SHAPECALC_LOG_LEVEL`` environment
        variable (a level name such as ``DEBUG``), defaults to ``WARNING``.
"""
import logging
import os

LOG_LEVEL_ENV_VAR: str = "SHAPECALC_LOG_LEVEL"


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Resolve the logging level from the environment.

    Unknown level names fall back to ``default``.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return default


LOG_LEVEL: int = get_log_level()
