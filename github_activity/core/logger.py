import logging
import sys

DEFAULT_LEVEL = "WARNING"


def get_logger(name: str, level: str = DEFAULT_LEVEL) -> logging.Logger:
    """
    Configures a structured logger for the CLI.
    Logs go to stderr: stdout is reserved for the rendered activity lines.
    The CLI re-levels these loggers from LOG_LEVEL / --verbose via `set_level`.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level)

        # Format: Time - Module - Level - Message
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger


def set_level(level: str) -> None:
    """Re-levels every logger already handed out by `get_logger`."""
    for name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("github_activity") and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
