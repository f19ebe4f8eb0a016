"""Configuration schemas."""

from .app_schema import AppConfig
from .aws_schema import AWSConfig
from .logging_schema import LoggingConfig

__all__ = ["AWSConfig", "AppConfig", "LoggingConfig"]
