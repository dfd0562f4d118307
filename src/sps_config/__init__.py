"""Portfolio config library."""

from .exceptions import ConfigError, ConfigErrorCodes
from .factory import build_client, build_logger, controller_from_config
from .loader import load
from .merger import deep_merge
from .models import (
    AppSection,
    ClientSection,
    CommentsSection,
    LogSection,
    ObservabilitySection,
    PortfolioConfig,
)

__all__ = [
    "AppSection",
    "ClientSection",
    "CommentsSection",
    "LogSection",
    "ObservabilitySection",
    "PortfolioConfig",
    "load",
    "build_client",
    "build_logger",
    "controller_from_config",
    "deep_merge",
    "ConfigError",
    "ConfigErrorCodes",
]
