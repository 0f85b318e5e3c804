"""Settings loaded from the environment."""

from dataclasses import dataclass

from ..http_client import HttpClientConfig
from .schema import ConfigSchema
from .validation import load_env_var


@dataclass(frozen=True)
class GraphSettings:
    """Immutable settings snapshot.

    Attributes:
        api_version: Graph API version used in request paths
        http_timeout: HTTP request timeout in seconds
        log_level: Logging level name
        app_id: Default app id for the CLI, if configured
        app_secret: Default app secret for the CLI, if configured
    """

    api_version: str
    http_timeout: float
    log_level: str
    app_id: int | None = None
    app_secret: str | None = None

    def http_client_config(self) -> HttpClientConfig:
        return HttpClientConfig(timeout=self.http_timeout)


class Settings:
    """Loads GraphSettings using the schema-based approach."""

    @staticmethod
    def load() -> GraphSettings:
        """Load settings from environment variables or defaults.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return GraphSettings(
            api_version=load_env_var(ConfigSchema.GRAPH_API_VERSION),
            http_timeout=load_env_var(ConfigSchema.GRAPH_HTTP_TIMEOUT),
            # Extract just the first word to handle trailing comments
            log_level=load_env_var(ConfigSchema.LOG_LEVEL).split()[0].upper(),
            app_id=load_env_var(ConfigSchema.FB_APP_ID),
            app_secret=load_env_var(ConfigSchema.FB_APP_SECRET),
        )
