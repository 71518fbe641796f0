"""Core types: exit codes, results and configuration."""

from .config import Config, ConfigError, FeedSettings, HeadingMarkers, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "FeedSettings",
    "HeadingMarkers",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
