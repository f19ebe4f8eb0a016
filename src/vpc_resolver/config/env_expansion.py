"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default} is not understood by os.path.expandvars
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _replace_with_default(match: "re.Match[str]") -> str:
    name, default = match.group(1), match.group(2)
    return os.environ.get(name, default)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings support ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Dicts and
    lists are expanded recursively; other values are returned unchanged.
    References to unset variables without a default are left as-is.
    """
    if isinstance(value, str):
        return os.path.expandvars(_DEFAULT_PATTERN.sub(_replace_with_default, value))
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    if not config:
        return {}
    return expand_env_vars(config)
