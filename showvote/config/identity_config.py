"""Anonymous identity configuration.

Environment Variables:
- JWT_SECRET: Signing secret for identity tokens (required in production)
- IDENTITY_TOKEN_TTL_DAYS: Token validity in days (default: 30)
- IDENTITY_COOKIE_NAME: Cookie carrying the token (default: token)
- IDENTITY_COOKIE_SECURE: Set the Secure cookie flag (default: false)
"""

from __future__ import annotations

from dataclasses import dataclass

from showvote.config._env import get_bool_env, get_int_env, get_str_env

DEFAULT_TOKEN_TTL_DAYS: int = 30
DEFAULT_COOKIE_NAME: str = "token"
# Used only when ENVIRONMENT is development/test and JWT_SECRET is unset
DEVELOPMENT_SECRET: str = "showvote-development-secret-do-not-use-in-production"
MIN_SECRET_LENGTH: int = 16


@dataclass(frozen=True)
class IdentityConfig:
    """Configuration for anonymous identity tokens.

    Attributes:
        secret: HMAC secret for signing tokens.
        token_ttl_days: How long an issued identity stays valid.
        cookie_name: Name of the http-only cookie.
        cookie_secure: Whether the cookie requires HTTPS.
        algorithm: JWT signing algorithm.
    """

    secret: str
    token_ttl_days: int = DEFAULT_TOKEN_TTL_DAYS
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie_secure: bool = False
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if len(self.secret) < MIN_SECRET_LENGTH:
            raise ValueError(
                f"Identity secret must be at least {MIN_SECRET_LENGTH} characters"
            )
        if self.token_ttl_days < 1:
            raise ValueError(
                f"token_ttl_days must be positive, got {self.token_ttl_days}"
            )
        if not self.cookie_name:
            raise ValueError("cookie_name must not be empty")

    @property
    def max_age_seconds(self) -> int:
        return self.token_ttl_days * 24 * 60 * 60

    @classmethod
    def from_environment(cls, environment: str = "production") -> IdentityConfig:
        """Create config from environment variables.

        Args:
            environment: Deployment environment. Outside development/test a
                JWT_SECRET is mandatory.

        Raises:
            ValueError: If JWT_SECRET is missing in production.
        """
        secret = get_str_env("JWT_SECRET")
        if secret is None:
            if environment not in ("development", "test"):
                raise ValueError(
                    "JWT_SECRET environment variable not set. "
                    "Required to sign anonymous identity tokens."
                )
            secret = DEVELOPMENT_SECRET

        return cls(
            secret=secret,
            token_ttl_days=get_int_env(
                "IDENTITY_TOKEN_TTL_DAYS", DEFAULT_TOKEN_TTL_DAYS
            ),
            cookie_name=get_str_env("IDENTITY_COOKIE_NAME", DEFAULT_COOKIE_NAME)
            or DEFAULT_COOKIE_NAME,
            cookie_secure=get_bool_env("IDENTITY_COOKIE_SECURE", False),
        )
