"""Identity issuer port.

Anonymous viewers are identified by an opaque id carried in a signed,
expiring credential held by the client. Resolution never fails: a missing
or invalid credential results in a fresh identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class VoterIdentity:
    """Resolved anonymous identity.

    Attributes:
        user_id: Opaque identifier used for vote deduplication.
        token: Signed credential carrying user_id.
        issued: True when a new credential was minted and must be sent
            back to the client.
    """

    user_id: str
    token: str
    issued: bool


class IdentityIssuerProtocol(Protocol):
    """Protocol for anonymous identity issuance."""

    def resolve(self, token: str | None) -> VoterIdentity:
        """Extract the identity from token, minting a new one if needed."""
        ...

    def issue(self) -> VoterIdentity:
        """Mint a brand-new identity and credential."""
        ...
