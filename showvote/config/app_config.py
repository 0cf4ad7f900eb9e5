"""Application-level configuration.

Environment Variables:
- ENVIRONMENT: production | development | test (default: production)
- CLIENT_URL: Allowed CORS origin of the voting client (default: none)
- DATABASE_URL: PostgreSQL URL; unset means in-memory repositories
"""

from __future__ import annotations

from dataclasses import dataclass

from showvote.config._env import get_str_env

VALID_ENVIRONMENTS = frozenset({"production", "development", "test"})


@dataclass(frozen=True)
class AppConfig:
    """Top-level application settings.

    Attributes:
        environment: Deployment environment name.
        client_url: Origin allowed to call the API with credentials.
        database_url: PostgreSQL connection URL, or None for in-memory storage.
    """

    environment: str = "production"
    client_url: str | None = None
    database_url: str | None = None

    def __post_init__(self) -> None:
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @property
    def uses_database(self) -> bool:
        return self.database_url is not None

    @property
    def cors_origins(self) -> list[str]:
        if self.client_url:
            return [self.client_url.rstrip("/")]
        return []

    @classmethod
    def from_environment(cls) -> AppConfig:
        return cls(
            environment=(get_str_env("ENVIRONMENT", "production") or "production").lower(),
            client_url=get_str_env("CLIENT_URL"),
            database_url=get_str_env("DATABASE_URL"),
        )
