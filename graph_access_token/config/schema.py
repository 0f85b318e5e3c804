"""Declarative schema for environment variable configuration.

Single definition point for every environment variable the library and
CLI read, with type coercion and validation rules.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..constants import GraphApi, HttpProtocol, ValidationLimits

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Target type (int, float or str)
        description: Human-readable description for docs
        validator: Optional custom validation function
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Graph API ===

    GRAPH_API_VERSION = EnvVarSpec(
        name="GRAPH_API_VERSION",
        default=GraphApi.VERSION,
        type_hint=str,
        description="Graph API version used in request paths (e.g. v15.0)",
        validator=lambda x: bool(x) and "/" not in x and " " not in x,
    )

    GRAPH_HTTP_TIMEOUT = EnvVarSpec(
        name="GRAPH_HTTP_TIMEOUT",
        default=float(HttpProtocol.DEFAULT_TIMEOUT),
        type_hint=float,
        description="HTTP request timeout in seconds",
        validator=lambda x: (
            ValidationLimits.MIN_TIMEOUT_SECONDS <= x <= ValidationLimits.MAX_TIMEOUT_SECONDS
        ),
    )

    # === App credentials (CLI) ===

    FB_APP_ID = EnvVarSpec(
        name="FB_APP_ID",
        default=None,
        type_hint=int,
        description="Facebook app id",
        validator=lambda x: x >= 0,
    )

    FB_APP_SECRET = EnvVarSpec(
        name="FB_APP_SECRET",
        default=None,
        type_hint=str,
        description="Facebook app secret",
        validator=lambda x: bool(x),
    )

    # === Logging ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper() in LOG_LEVELS if x.split() else False,
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications."""
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }

    @classmethod
    def generate_markdown_docs(cls) -> str:
        """Generate a Markdown table of all environment variables."""
        lines = [
            "| Variable | Default | Description |",
            "|----------|---------|-------------|",
        ]
        for spec in sorted(cls.all_specs().values(), key=lambda s: s.name):
            default = "" if spec.default is None else f"`{spec.default}`"
            lines.append(f"| `{spec.name}` | {default} | {spec.description} |")
        return "\n".join(lines)
