"""
Library-wide defaults and logging setup.
"""
import logging

from vecmath.types.enums import LogLevel, Precision

_LOGGING_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 1,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

class Settings:
    """
    Defaults shared by every Vector3. Values are class attributes so callers
    can override them once for the whole process.
    """

    APPROX_TOLERANCE: float = 1e-9
    """Default absolute tolerance used by Vector3.approx_equals."""

    STR_PRECISION: int = 2
    """Number of decimals shown by str(Vector3)."""

    DEFAULT_PRECISION: Precision = Precision.DOUBLE
    """Component width used by Vector3.to_bytes / from_bytes when none is given."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Level applied to the package logger by configure_logging()."""


def configure_logging(level: LogLevel | None = None) -> logging.Logger:
    """
    Applies a LogLevel to the "vecmath" logger and returns it.

    Handlers are left to the application; the package only installs a
    NullHandler.
    """
    if level is None:
        level = Settings.LOG_LEVEL
    package_logger = logging.getLogger("vecmath")
    package_logger.setLevel(_LOGGING_LEVELS[LogLevel(level)])
    return package_logger
