"""Anonymous identity dependency.

Reads the identity cookie, resolves it through the identity service and
re-issues the cookie whenever a new identity had to be minted. Resolution
never fails the request.
"""

from __future__ import annotations

from fastapi import Depends, Request, Response

from showvote.api.dependencies.voting import get_identity_config, get_identity_service
from showvote.application.ports.identity_issuer import (
    IdentityIssuerProtocol,
    VoterIdentity,
)
from showvote.config.identity_config import IdentityConfig


def attach_identity_cookie(
    response: Response, identity: VoterIdentity, config: IdentityConfig
) -> None:
    """Set the identity cookie on response when a new identity was issued."""
    if not identity.issued:
        return
    response.set_cookie(
        key=config.cookie_name,
        value=identity.token,
        max_age=config.max_age_seconds,
        httponly=True,
        secure=config.cookie_secure,
        samesite="lax",
    )


def get_voter_identity(
    request: Request,
    response: Response,
    service: IdentityIssuerProtocol = Depends(get_identity_service),
    config: IdentityConfig = Depends(get_identity_config),
) -> VoterIdentity:
    """Resolve the caller's anonymous identity.

    The cookie is set on the dependency response, which FastAPI merges into
    model responses. Routes that return their own Response must call
    attach_identity_cookie() themselves.
    """
    identity = service.resolve(request.cookies.get(config.cookie_name))
    attach_identity_cookie(response, identity, config)
    return identity
