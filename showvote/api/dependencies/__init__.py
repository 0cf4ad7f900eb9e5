"""FastAPI dependency providers for Show Vote."""

from showvote.api.dependencies.identity import attach_identity_cookie, get_voter_identity
from showvote.api.dependencies.voting import (
    get_daily_selection_service,
    get_identity_config,
    get_identity_service,
    get_results_service,
    get_show_catalog_service,
    get_voting_service,
    reset_showvote_dependencies,
)

__all__: list[str] = [
    "attach_identity_cookie",
    "get_daily_selection_service",
    "get_identity_config",
    "get_identity_service",
    "get_results_service",
    "get_show_catalog_service",
    "get_voter_identity",
    "get_voting_service",
    "reset_showvote_dependencies",
]
