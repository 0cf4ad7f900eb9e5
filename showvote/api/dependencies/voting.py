"""Show Vote API dependencies.

Dependency injection setup for the voting components. Every component is
a lazily built singleton; tests swap pieces with the set_* helpers and
call reset_showvote_dependencies() between cases.

Storage is chosen by AppConfig: PostgreSQL when DATABASE_URL is set,
in-memory stubs otherwise.
"""

from __future__ import annotations

from showvote.application.ports.identity_issuer import IdentityIssuerProtocol
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.services.daily_selection_service import (
    DailySelectionService,
)
from showvote.application.services.identity_service import JwtIdentityService
from showvote.application.services.results_service import ResultsService
from showvote.application.services.show_catalog_service import ShowCatalogService
from showvote.application.services.time_authority_service import SystemTimeAuthority
from showvote.application.services.voting_service import VotingService
from showvote.bootstrap.repositories import Repositories, build_repositories
from showvote.config.app_config import AppConfig
from showvote.config.identity_config import IdentityConfig
from showvote.config.voting_config import VotingScheduleConfig
from showvote.domain.services.slate_drawer import SlateDrawer

_app_config: AppConfig | None = None
_voting_config: VotingScheduleConfig | None = None
_identity_config: IdentityConfig | None = None
_time_authority: TimeAuthorityProtocol | None = None
_repositories: Repositories | None = None
_slate_drawer: SlateDrawer | None = None
_daily_selection_service: DailySelectionService | None = None
_voting_service: VotingService | None = None
_results_service: ResultsService | None = None
_show_catalog_service: ShowCatalogService | None = None
_identity_service: IdentityIssuerProtocol | None = None


def get_app_config() -> AppConfig:
    """Get application configuration loaded from environment."""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.from_environment()
    return _app_config


def get_voting_config() -> VotingScheduleConfig:
    """Get voting schedule configuration loaded from environment."""
    global _voting_config
    if _voting_config is None:
        _voting_config = VotingScheduleConfig.from_environment()
    return _voting_config


def get_identity_config() -> IdentityConfig:
    """Get identity configuration loaded from environment.

    Raises:
        ValueError: If JWT_SECRET is missing in production.
    """
    global _identity_config
    if _identity_config is None:
        _identity_config = IdentityConfig.from_environment(
            environment=get_app_config().environment
        )
    return _identity_config


def get_time_authority() -> TimeAuthorityProtocol:
    """Get the wall-clock authority in the configured voting time zone."""
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority(get_voting_config().tzinfo())
    return _time_authority


def get_repositories() -> Repositories:
    global _repositories
    if _repositories is None:
        _repositories = build_repositories(get_app_config())
    return _repositories


def get_slate_drawer() -> SlateDrawer:
    global _slate_drawer
    if _slate_drawer is None:
        _slate_drawer = SlateDrawer(slate_size=get_voting_config().slate_size)
    return _slate_drawer


def get_daily_selection_service() -> DailySelectionService:
    """Get the daily selection service.

    Creates the service with:
    - Show and daily selection repositories
    - Time authority (today's date)
    - Slate drawer (slate size from config)
    """
    global _daily_selection_service
    if _daily_selection_service is None:
        repositories = get_repositories()
        _daily_selection_service = DailySelectionService(
            show_repository=repositories.shows,
            selection_repository=repositories.selections,
            time_authority=get_time_authority(),
            drawer=get_slate_drawer(),
        )
    return _daily_selection_service


def get_voting_service() -> VotingService:
    global _voting_service
    if _voting_service is None:
        repositories = get_repositories()
        _voting_service = VotingService(
            vote_repository=repositories.votes,
            selection_repository=repositories.selections,
            time_authority=get_time_authority(),
            schedule=get_voting_config().to_schedule(),
        )
    return _voting_service


def get_results_service() -> ResultsService:
    global _results_service
    if _results_service is None:
        repositories = get_repositories()
        _results_service = ResultsService(
            show_repository=repositories.shows,
            selection_repository=repositories.selections,
            vote_repository=repositories.votes,
            time_authority=get_time_authority(),
            schedule=get_voting_config().to_schedule(),
        )
    return _results_service


def get_show_catalog_service() -> ShowCatalogService:
    global _show_catalog_service
    if _show_catalog_service is None:
        _show_catalog_service = ShowCatalogService(get_repositories().shows)
    return _show_catalog_service


def get_identity_service() -> IdentityIssuerProtocol:
    global _identity_service
    if _identity_service is None:
        _identity_service = JwtIdentityService(
            config=get_identity_config(),
            time_authority=get_time_authority(),
        )
    return _identity_service


# Testing helper functions


def _drop_services() -> None:
    global _daily_selection_service, _voting_service, _results_service
    global _show_catalog_service, _identity_service
    _daily_selection_service = None
    _voting_service = None
    _results_service = None
    _show_catalog_service = None
    _identity_service = None


def reset_showvote_dependencies() -> None:
    """Reset all singleton instances for testing.

    Call this in test fixtures to ensure clean state between tests.
    """
    global _app_config, _voting_config, _identity_config
    global _time_authority, _repositories, _slate_drawer

    _app_config = None
    _voting_config = None
    _identity_config = None
    _time_authority = None
    _repositories = None
    _slate_drawer = None
    _drop_services()


def set_voting_config(config: VotingScheduleConfig) -> None:
    global _voting_config, _slate_drawer
    _voting_config = config
    _slate_drawer = None
    _drop_services()


def set_identity_config(config: IdentityConfig) -> None:
    global _identity_config
    _identity_config = config
    _drop_services()


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom time authority for testing.

    Args:
        time_authority: Usually a FakeTimeAuthority.
    """
    global _time_authority
    _time_authority = time_authority
    _drop_services()  # Force service recreation


def set_repositories(repositories: Repositories) -> None:
    global _repositories
    _repositories = repositories
    _drop_services()


def set_slate_drawer(drawer: SlateDrawer) -> None:
    global _slate_drawer
    _slate_drawer = drawer
    _drop_services()
