"""Host integration layer."""

from .deployment_hook import BEFORE_DEPLOY_INITIALIZE, VpcConfigHook

__all__ = ["BEFORE_DEPLOY_INITIALIZE", "VpcConfigHook"]
