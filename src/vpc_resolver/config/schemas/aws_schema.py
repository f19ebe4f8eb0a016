"""AWS provider configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AWSConfig(BaseModel):
    """AWS client configuration."""

    region: str = Field("us-east-1", description="Default AWS region")
    profile: Optional[str] = Field(None, description="Named AWS profile")
    endpoint_url: Optional[str] = Field(None, description="Custom EC2 endpoint URL")
    max_attempts: int = Field(3, description="Maximum attempts per AWS request")
    connect_timeout_ms: int = Field(10000, description="Connection timeout in milliseconds")

    @field_validator("profile", "endpoint_url")
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """Validate retry attempts."""
        if v < 1:
            raise ValueError("Maximum attempts must be at least 1")
        return v

    @field_validator("connect_timeout_ms")
    @classmethod
    def validate_connect_timeout(cls, v: int) -> int:
        """Validate connection timeout."""
        if v <= 0:
            raise ValueError("Connection timeout must be positive")
        return v
