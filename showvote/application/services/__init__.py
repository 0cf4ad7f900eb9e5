"""Application services for Show Vote."""

from showvote.application.services.daily_selection_service import (
    DailySelectionService,
)
from showvote.application.services.identity_service import JwtIdentityService
from showvote.application.services.results_service import ResultsService
from showvote.application.services.show_catalog_service import ShowCatalogService
from showvote.application.services.time_authority_service import SystemTimeAuthority
from showvote.application.services.voting_service import VotingService

__all__: list[str] = [
    "DailySelectionService",
    "JwtIdentityService",
    "ResultsService",
    "ShowCatalogService",
    "SystemTimeAuthority",
    "VotingService",
]
