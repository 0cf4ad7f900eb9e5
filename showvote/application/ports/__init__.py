"""Application ports (interfaces) for Show Vote."""

from showvote.application.ports.daily_selection_repository import (
    DailySelectionRepositoryProtocol,
)
from showvote.application.ports.identity_issuer import (
    IdentityIssuerProtocol,
    VoterIdentity,
)
from showvote.application.ports.show_repository import ShowRepositoryProtocol
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.ports.vote_repository import VoteRepositoryProtocol

__all__: list[str] = [
    "DailySelectionRepositoryProtocol",
    "IdentityIssuerProtocol",
    "ShowRepositoryProtocol",
    "TimeAuthorityProtocol",
    "VoteRepositoryProtocol",
    "VoterIdentity",
]
