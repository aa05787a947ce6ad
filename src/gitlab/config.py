"""Client settings via pydantic-settings.

Loads configuration from environment variables with the GITLAB_ prefix.
Values passed directly to ``Client`` take precedence over these.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = "gitlab-client-python"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Examples:
        Point the client at a self-hosted instance::

            GITLAB_ENDPOINT=https://gitlab.example.com/api/v4
            GITLAB_PRIVATE_TOKEN=glpat-xxxxxxxx
    """

    # API base URL, including the version segment
    endpoint: str | None = None
    private_token: str | None = None

    # HTTP settings
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 30.0

    model_config = {"env_prefix": "GITLAB_"}


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings singleton."""
    return Settings()
