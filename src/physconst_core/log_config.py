# --- src/physconst_core/log_config.py ---
import logging
import os
import sys

PACKAGE_LOGGER_NAME = "physconst_core"
LOG_LEVEL_ENV_VAR = "PHYSCONST_LOG_LEVEL"


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # Unknown names come back as the string "Level <name>".
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level=None):
    """
    Configures console logging to stdout.

    The level defaults to the PHYSCONST_LOG_LEVEL environment variable, then INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    level = _resolve_level(level)

    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger()

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.debug("Logging configured at level %s.", logging.getLevelName(level))


def set_package_log_level(level) -> int:
    """Sets the level of the physconst_core logger only, leaving the root logger alone."""
    resolved = _resolve_level(level)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(resolved)
    return resolved
