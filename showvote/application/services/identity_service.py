"""Anonymous identity issuance with signed JWT credentials.

Every voter is identified by a random opaque id embedded in an HS256 JWT.
The token lives in an http-only cookie on the client and is valid for a
fixed number of days.

Resolution never raises. A missing, tampered, expired or malformed token is
silently replaced with a freshly minted identity. This means a viewer who
clears the cookie gets a new identity and can vote again; the service
accepts that.

Expiry is checked against the injected time authority rather than the
process clock so tests can move time freely.
"""

from __future__ import annotations

import secrets
from datetime import timedelta

import jwt

from showvote.application.ports.identity_issuer import VoterIdentity
from showvote.application.ports.time_authority import TimeAuthorityProtocol
from showvote.application.services.base import LoggingMixin
from showvote.config.identity_config import IdentityConfig

USER_ID_BYTES: int = 16
USER_ID_CLAIM: str = "sub"


class JwtIdentityService(LoggingMixin):
    """Issues and verifies anonymous identity tokens.

    Attributes:
        _config: Identity configuration (secret, validity, algorithm).
        _time: Time authority used for iat/exp.
    """

    def __init__(
        self,
        config: IdentityConfig,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._config = config
        self._time = time_authority
        self._init_logger(component="identity")

    def issue(self) -> VoterIdentity:
        """Mint a new opaque id and a signed credential for it."""
        user_id = secrets.token_hex(USER_ID_BYTES)
        issued_at = self._time.utcnow()
        payload = {
            USER_ID_CLAIM: user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(
                (issued_at + timedelta(days=self._config.token_ttl_days)).timestamp()
            ),
        }
        token = jwt.encode(
            payload, self._config.secret, algorithm=self._config.algorithm
        )
        self._log.debug("identity_issued")
        return VoterIdentity(user_id=user_id, token=token, issued=True)

    def resolve(self, token: str | None) -> VoterIdentity:
        """Return the identity carried by token, or a new one.

        Args:
            token: Raw credential from the client, if any.

        Returns:
            VoterIdentity. issued is True when a replacement was minted.
        """
        if not token:
            return self.issue()

        user_id = self._verify(token)
        if user_id is None:
            return self.issue()
        return VoterIdentity(user_id=user_id, token=token, issued=False)

    def _verify(self, token: str) -> str | None:
        log = self._log_operation("verify_identity")
        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", USER_ID_CLAIM],
                },
            )
        except jwt.PyJWTError as exc:
            log.info("identity_token_rejected", reason=type(exc).__name__)
            return None

        expires_at = payload.get("exp")
        if not isinstance(expires_at, (int, float)):
            log.info("identity_token_rejected", reason="InvalidExpiry")
            return None
        if expires_at <= self._time.utcnow().timestamp():
            log.info("identity_token_rejected", reason="ExpiredSignatureError")
            return None

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            log.info("identity_token_rejected", reason="InvalidSubject")
            return None
        return user_id
