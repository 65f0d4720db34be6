import sys
from typing import Optional

from loguru import logger
from network_dashboard.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

class AppLogger:
    """Global logger configuration for the dashboard.

    Installs a single stderr sink at the level from get_config().log_level.
    Re-running the setup (e.g. after set_config_for_test) replaces the sink.
    """
    _configured_level: Optional[str] = None

    def __init__(self) -> None:
        log_level = get_config().log_level.upper()
        if AppLogger._configured_level != log_level:
            logger.remove()
            logger.configure(extra={"name": "network_dashboard"})
            logger.add(sink=sys.stderr, level=log_level, format=LOG_FORMAT)
            AppLogger._configured_level = log_level
        self.logger = logger

    def get_logger(self, name: Optional[str] = None):
        """Get the configured logger instance.

        Args:
            name (str, optional): Name for the logger context. Defaults to None.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(name=name)
        return self.logger

def get_logger(name: Optional[str] = None):
    """Get an application logger, configuring the sink from the latest config."""
    return AppLogger().get_logger(name)
