"""Startup hooks for the Show Vote API.

1. Load .env (python-dotenv) so local settings apply before config is read
2. Configure structured logging
3. Validate configuration, failing fast on bad values
4. Create the database schema when PostgreSQL is configured

Usage:
    configure_logging()
    validate_configuration()
    await prepare_database()
"""

import os

from dotenv import load_dotenv
from structlog import get_logger

from showvote.api.dependencies.voting import (
    get_app_config,
    get_identity_config,
    get_voting_config,
)
from showvote.infrastructure.observability import configure_structlog
from showvote.bootstrap.repositories import prepare_storage

ENVIRONMENT_VAR = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "production"

logger = get_logger()


def load_environment() -> None:
    """Load variables from a .env file without overriding the process env."""
    load_dotenv(override=False)


def configure_logging() -> None:
    """Configure structlog based on the ENVIRONMENT variable.

    - production (default): JSON output for log aggregation
    - development/test: colored console output
    """
    environment = os.getenv(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    configure_structlog(environment=environment)

    log = get_logger().bind(component="startup_logging")
    log.info("structured_logging_configured", environment=environment)


def validate_configuration() -> None:
    """Load every configuration object once so invalid settings stop startup.

    Raises:
        ValueError: If any configuration value is invalid or missing.
    """
    log = logger.bind(component="startup_validation")
    app_config = get_app_config()
    voting_config = get_voting_config()
    identity_config = get_identity_config()
    log.info(
        "configuration_validated",
        environment=app_config.environment,
        uses_database=app_config.uses_database,
        open_hour=voting_config.open_hour,
        close_hour=voting_config.close_hour,
        reveal_hour=voting_config.reveal_hour,
        slate_size=voting_config.slate_size,
        timezone=voting_config.timezone,
        token_ttl_days=identity_config.token_ttl_days,
    )


async def prepare_database() -> None:
    """Create tables and constraints when a database is configured."""
    config = get_app_config()
    if not config.uses_database:
        return
    await prepare_storage(config)
    logger.info("database_schema_ready")
