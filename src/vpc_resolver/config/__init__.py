"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import AppConfig, AWSConfig, LoggingConfig

__all__ = [
    "AWSConfig",
    "AppConfig",
    "ConfigurationManager",
    "LoggingConfig",
]
