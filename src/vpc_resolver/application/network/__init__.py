"""Network config application service."""

from .service import NetworkConfigService

__all__ = ["NetworkConfigService"]
