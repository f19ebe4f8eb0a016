"""Main application configuration schema."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .aws_schema import AWSConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    aws: AWSConfig = Field(default_factory=lambda: AWSConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    network: Optional[Dict[str, Any]] = Field(
        None, description="Default declared network names (vpcName, subnetNames, securityGroupNames)"
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create and validate configuration from a dictionary."""
        return cls.model_validate(data)
