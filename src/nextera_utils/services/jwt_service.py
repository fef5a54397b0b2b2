"""JWT token service.

Issues and validates HS256 compact tokens, and reads claims from tokens
without verifying them for logging purposes.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from datetime import timedelta
from typing import TYPE_CHECKING

import jwt
from pydantic import ValidationError

from nextera_utils.exceptions import (
    ContractViolationError,
    InvalidTokenError,
    MalformedTokenError,
    TokenEncodingError,
)
from nextera_utils.schemas import (
    ClaimsPayload,
    IssuedToken,
    UnverifiedClaims,
    VerifiedClaims,
)
from nextera_utils.shared.time import utc_now

if TYPE_CHECKING:
    from nextera_config import Settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "exp", "iss", "aud"]


def issue_token(
    user_id: int,
    secret: str | bytes,
    ttl_seconds: int,
    issuer: str,
    audience: str,
    organization_id: int | None = None,
) -> IssuedToken:
    """Sign a new token for ``user_id``.

    Parameters
    ----------
    user_id
        Subject of the token
    secret
        Shared HMAC key
    ttl_seconds
        Lifetime of the token, must be positive
    issuer
        Issuer name or session identifier, stored as ``iss``
    audience
        Service the token is meant for, stored as ``aud``
    organization_id
        Optional organization, stored as ``org``

    Returns
    -------
    The token and its naive UTC expiration

    Raises
    ------
    ContractViolationError
        If ``secret`` is empty or ``ttl_seconds`` is not positive
    TokenEncodingError
        If the token cannot be signed
    """
    if not secret:
        msg = "JWT secret key cannot be empty"
        raise ContractViolationError(msg)
    if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds <= 0:
        msg = f"Token lifetime must be a positive number of seconds, got {ttl_seconds!r}"
        raise ContractViolationError(msg)

    expires_at = utc_now() + timedelta(seconds=ttl_seconds)
    exp = int(expires_at.timestamp())

    try:
        payload = ClaimsPayload(
            user_id=user_id,
            organization_id=organization_id,
            exp=exp,
            issuer=issuer,
            audience=audience,
        )
        token = jwt.encode(payload.to_jwt(), secret, algorithm=ALGORITHM)
    except (ValidationError, jwt.PyJWTError, TypeError, ValueError) as e:
        logger.error("Failed to encode token for user %s: %s", user_id, e)
        raise TokenEncodingError(details={"error": str(e)}) from e

    expires_at = expires_at.replace(microsecond=0, tzinfo=None)
    return IssuedToken(token=token, expires_at=expires_at)


def validate_token(
    token: str,
    secret: str | bytes,
    audience: str,
    leeway_seconds: int = 0,
) -> VerifiedClaims:
    """Verify a token and return its claims.

    Checks the HS256 signature, that the audience equals ``audience``
    exactly, that all required claims are present, and that the token has
    not expired (``now < exp + leeway_seconds``).

    Raises
    ------
    InvalidTokenError
        On any failure. The message is the same for every cause; the
        cause is in ``error.reason``.
    """
    try:
        raw = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=audience,
            options={
                "require": REQUIRED_CLAIMS,
                # Expiry is checked below against our own clock.
                "verify_exp": False,
                # Services in the ecosystem put an integer user id in sub.
                "verify_sub": False,
                "strict_aud": True,
            },
        )
    except jwt.InvalidSignatureError as e:
        raise _rejected("signature", e) from e
    except jwt.InvalidAudienceError as e:
        raise _rejected("audience", e) from e
    except jwt.MissingRequiredClaimError as e:
        raise _rejected("claims", e) from e
    except jwt.DecodeError as e:
        raise _rejected("malformed", e) from e
    except jwt.InvalidTokenError as e:
        raise _rejected("claims", e) from e

    try:
        payload = ClaimsPayload.model_validate(raw)
    except ValidationError as e:
        raise _rejected("claims", e) from e

    if payload.exp <= utc_now().timestamp() - leeway_seconds:
        raise _rejected("expired", f"exp={payload.exp}")

    return VerifiedClaims.from_payload(payload)


def _rejected(reason: str, cause: object) -> InvalidTokenError:
    logger.debug("Token rejected (%s): %s", reason, cause)
    return InvalidTokenError(reason=reason)


def normalize_base64(segment: str) -> str:
    """Pad a base64url segment with ``=`` to a multiple of four characters."""
    return segment + "=" * (-len(segment) % 4)


def extract_claims_unverified(token: str) -> UnverifiedClaims:
    """Read the claims of a token WITHOUT verifying it.

    The signature, expiry and audience are not checked. Only use this for
    logging or diagnostics on tokens that were validated elsewhere; use
    ``validate_token`` for anything security related.

    Raises
    ------
    MalformedTokenError
        If the token is not three segments, or the payload is not valid
        base64url, UTF-8, JSON, or claims
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedTokenError("Invalid token format")

    try:
        data = base64.b64decode(normalize_base64(parts[1]), altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedTokenError(f"Base64 decoding failed: {e}") from e

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedTokenError(f"Invalid UTF-8 in payload: {e}") from e

    try:
        payload = ClaimsPayload.model_validate(json.loads(text))
    except (ValidationError, ValueError) as e:
        raise MalformedTokenError("Failed to deserialize claims", details={"error": str(e)}) from e

    return UnverifiedClaims.from_payload(payload)


def extract_user_id_unverified(token: str) -> int:
    """Read the user id (``sub``) of a token WITHOUT verifying it.

    See ``extract_claims_unverified`` for the caveats.
    """
    return extract_claims_unverified(token).user_id


class JWTService:
    """Service for JWT token creation and verification.

    Binds the shared secret, audience and issuer so callers only pass the
    subject around.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key", audience="NEXTERA USER")
    >>> token, expires_at = service.create_token(user_id=1, organization_id=1)
    >>> claims = service.verify_token(token)
    >>> print(claims.user_id)
    1
    """

    DEFAULT_EXPIRE_SECONDS = 86400
    DEFAULT_ISSUER = "Next Era Authentication Service"
    ALGORITHM = ALGORITHM

    def __init__(
        self,
        secret_key: str | bytes,
        audience: str,
        issuer: str = DEFAULT_ISSUER,
        expire_seconds: int = DEFAULT_EXPIRE_SECONDS,
        leeway_seconds: int = 0,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        audience
            Audience written into new tokens and required on verification
        issuer
            Default ``iss`` claim for new tokens
        expire_seconds
            Default token lifetime in seconds (default 86400)
        leeway_seconds
            Clock skew tolerated when checking expiry (default 0)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ContractViolationError(msg)

        self._secret_key = secret_key
        self._audience = audience
        self._issuer = issuer
        self._expire = timedelta(seconds=expire_seconds)
        self._leeway_seconds = leeway_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTService:
        """Build a service from application settings."""
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            expire_seconds=settings.jwt_expire_seconds,
            leeway_seconds=settings.jwt_leeway_seconds,
        )

    @property
    def audience(self) -> str:
        return self._audience

    def create_token(
        self,
        user_id: int,
        organization_id: int | None = None,
        issuer: str | None = None,
        expires_delta: timedelta | None = None,
    ) -> IssuedToken:
        """Create a signed token.

        Parameters
        ----------
        user_id
            The user's identifier
        organization_id
            The user's organization (optional)
        issuer
            Overrides the default issuer, e.g. with a session id
        expires_delta
            Custom lifetime (optional)

        Returns
        -------
        The encoded token and its naive UTC expiration
        """
        expire = self._expire if expires_delta is None else expires_delta
        return issue_token(
            user_id=user_id,
            secret=self._secret_key,
            ttl_seconds=int(expire.total_seconds()),
            issuer=issuer or self._issuer,
            audience=self._audience,
            organization_id=organization_id,
        )

    def verify_token(self, token: str) -> VerifiedClaims:
        """Verify and decode a token issued for this service's audience.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        return validate_token(
            token,
            self._secret_key,
            self._audience,
            leeway_seconds=self._leeway_seconds,
        )
