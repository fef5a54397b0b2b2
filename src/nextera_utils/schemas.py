"""Token schemas and data structures.

Verified and unverified claims are deliberately separate types. Only
``JWTService.verify_token`` / ``validate_token`` produce ``VerifiedClaims``;
the ``*_unverified`` extraction helpers produce ``UnverifiedClaims``. Code
that makes authorization decisions should accept ``VerifiedClaims`` only.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from nextera_utils.shared.time import utc_now


class ClaimsPayload(BaseModel):
    """Shape of the JSON payload carried by a token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: StrictInt = Field(..., alias="sub")
    organization_id: StrictInt | None = Field(None, alias="org")
    exp: StrictInt
    issuer: str = Field(..., alias="iss")
    audience: str = Field(..., alias="aud")

    def to_jwt(self) -> dict[str, Any]:
        """Return the claim dict to sign, omitting an unset organization."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class _Claims:
    user_id: int
    organization_id: int | None
    exp: int
    issuer: str
    audience: str

    @property
    def expires_at(self) -> datetime:
        """Expiration as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return utc_now() >= self.expires_at

    @classmethod
    def from_payload(cls, payload: ClaimsPayload):
        return cls(
            user_id=payload.user_id,
            organization_id=payload.organization_id,
            exp=payload.exp,
            issuer=payload.issuer,
            audience=payload.audience,
        )


@dataclass(frozen=True)
class VerifiedClaims(_Claims):
    """Claims of a token whose signature, expiry and audience were checked.

    Attributes
    ----------
    user_id
        Subject of the token (``sub``)
    organization_id
        Organization of the subject (``org``), if any
    exp
        Expiration in seconds since the UNIX epoch (UTC)
    issuer
        Issuer name or session identifier (``iss``)
    audience
        Service the token was issued for (``aud``)
    """


@dataclass(frozen=True)
class UnverifiedClaims(_Claims):
    """Claims read from a token WITHOUT any signature or expiry check.

    Only suitable for logging and diagnostics on tokens whose origin is
    already trusted. Never use for authorization.
    """


class IssuedToken(NamedTuple):
    """A freshly signed token and its expiration.

    ``expires_at`` is a naive UTC datetime truncated to whole seconds so it
    can be stored next to the token without decoding it again.
    """

    token: str
    expires_at: datetime
