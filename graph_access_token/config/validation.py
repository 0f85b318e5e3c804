"""Reading ConfigSchema variables from the environment."""

import os
from typing import Any

from ..exceptions import ConfigurationError
from .schema import ConfigSchema, EnvVarSpec


class ConfigError(ConfigurationError):
    """An environment variable holds an unusable value.

    Attributes:
        env_var: Name of the environment variable
        value: Raw value as found in the environment
        message: What is wrong with it
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def _coerce(spec: EnvVarSpec, raw_value: str) -> Any:
    if spec.type_hint in (int, float):
        return spec.type_hint(raw_value.strip())
    return raw_value


def load_env_var(spec: EnvVarSpec) -> Any:
    """Return the typed value of ``spec``, or its default when unset.

    Raises:
        ConfigError: If the value cannot be converted or is rejected by
            spec.validator
    """
    raw_value = os.environ.get(spec.name)
    if raw_value is None:
        return spec.default

    try:
        value = _coerce(spec, raw_value)
    except ValueError as e:
        raise ConfigError(
            spec.name, raw_value, f"Cannot convert to {spec.type_hint.__name__}: {e}"
        ) from e

    if spec.validator is not None and not spec.validator(value):
        raise ConfigError(spec.name, raw_value, f"Invalid value. Expected: {spec.description}")

    return value


def validate_all() -> list[ConfigError]:
    """Check every variable in ConfigSchema and return all failures at once."""
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
