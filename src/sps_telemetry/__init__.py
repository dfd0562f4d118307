"""Portfolio telemetry library."""

from .logger import logger_from_config, new_logger, noop_logger
from .models import LogConfig

__all__ = [
    "LogConfig",
    "logger_from_config",
    "new_logger",
    "noop_logger",
]
