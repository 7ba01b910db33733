"""
Logger setup shared by env_validator modules.

Every module logs under the "env_validator" namespace:

    from env_validator.utils.logger import get_logger
    logger = get_logger(__name__)

As a library, env_validator only attaches a NullHandler; nothing is printed
unless the application opts in. Scripts (actions/check_env.py, main.py) call
configure_root_logger() once at startup with the ENV_VALIDATOR_LOG_LEVEL
setting. Only variable names are ever logged, never values.
"""

import logging


ROOT_LOGGER_NAME = "env_validator"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LEVEL = "WARNING"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_root_logger(level: str = DEFAULT_LEVEL) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Safe to call repeatedly; the stream handler is only added once.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    has_stream = any(
        isinstance(handler, logging.StreamHandler) for handler in root.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the env_validator namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
