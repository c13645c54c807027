"""
Logging Helpers
===============
The package logs under the 'shapecalc' namespace and, as a library, ships
with only a ``NullHandler`` attached (see ``shapecalc/__init__.py``).

``setup_logging`` is an opt-in convenience for applications and scripts that
want to see the DEBUG records emitted on rejected input. It only manages the
handler it installed itself; handlers added by the host application are left
alone.
"""
import logging
from typing import IO, Optional

from shapecalc import config

PACKAGE_LOGGER: str = "shapecalc"
DEFAULT_FORMAT: str = "%(levelname)s %(name)s: %(message)s"

# Marks handlers installed here so repeat calls replace them instead of stacking
_OWNED_ATTR = "_shapecalc_owned"


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def setup_logging(
    level: Optional[int] = None,
    *,
    handler: Optional[logging.Handler] = None,
    stream: Optional[IO[str]] = None,
    fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """
    Route 'shapecalc' records to a handler of the caller's choosing.

    Args:
        level: Logger level. Defaults to ``config.LOG_LEVEL``.
        handler: Handler to install, e.g. a ``FileHandler`` the caller opened
            in whatever mode it needs. Takes precedence over ``stream``.
        stream: Stream for a ``StreamHandler`` when no handler is given.
            ``None`` means ``sys.stderr``, the logging module's default.
        fmt: Format applied to the handler if it has no formatter yet.

    Returns:
        The package logger.
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for old in _owned_handlers(logger):
        logger.removeHandler(old)
        old.close()

    if handler is None:
        handler = logging.StreamHandler(stream)
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED_ATTR, True)
    logger.addHandler(handler)

    return logger


def teardown_logging() -> None:
    """Remove and close the handler installed by ``setup_logging``, if any."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in _owned_handlers(logger):
        logger.removeHandler(old)
        old.close()
