import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional


class HomeDirectoryFilter(logging.Filter):
    """Filter to shorten the user's home directory to '~' in log records."""

    def __init__(self, home: Optional[str] = None):
        super().__init__()
        self.home = home if home is not None else str(Path.home())
        # only whole leading path components: /root matches /root/x, not /rootfs
        self._home_re = re.compile(
            r"(?<![\w.~/\\-])" + re.escape(self.home) + r"(?=$|[\s/\\'\")\],:;])"
        )

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite home directory prefixes in the log message."""
        if isinstance(record.msg, str):
            record.msg = self._mask_value(record.msg)

        if hasattr(record, 'args') and record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._mask_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._mask_value(arg) for arg in record.args)

        return True

    def _mask_value(self, value):
        """Mask the home directory in string and path arguments."""
        if isinstance(value, Path):
            value = str(value)
        if isinstance(value, str) and self.home and self.home != os.sep:
            value = self._home_re.sub('~', value)
        return value


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the top-level logger (e.g., 'cli', 'splitter')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')
    log_level = log_level.upper()

    level = getattr(logging, log_level, logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    # stdout carries chunk progress
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler.setFormatter(formatter)
    handler.addFilter(HomeDirectoryFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
