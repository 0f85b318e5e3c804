"""Environment-driven configuration."""

from .schema import ConfigSchema, EnvVarSpec
from .settings import GraphSettings, Settings
from .validation import ConfigError, load_env_var, validate_all

__all__ = [
    "ConfigError",
    "ConfigSchema",
    "EnvVarSpec",
    "GraphSettings",
    "Settings",
    "load_env_var",
    "validate_all",
]
