"""Next Era Utils - shared helpers for Next Era services.

This package bundles small, independent helpers:
- JWT token issuance and validation (HS256)
- Password hashing (Argon2, bcrypt) and strong password generation
- Time helpers with a fixed table of supported UTC offsets
- Best-effort string to number parsing
- Response and cache envelopes

Architecture:
    nextera_utils/
    ├── services/           # JWT, password hashing, password generation
    ├── shared/             # Time and parsing helpers
    ├── models/             # Response / cache envelopes (pydantic)
    ├── schemas.py          # Token claims
    └── exceptions.py       # Error codes and exceptions

Usage:
    from nextera_utils import JWTService, PasswordHashingService

    service = JWTService(secret_key=secret, audience="NEXTERA USER")
    token, expires_at = service.create_token(user_id=1, organization_id=1)
    claims = service.verify_token(token)
"""

from nextera_utils.exceptions import (
    ContractViolationError,
    ErrorCode,
    HashingError,
    InvalidHashFormatError,
    InvalidTokenError,
    MalformedTokenError,
    NexteraError,
    PasswordError,
    TokenEncodingError,
    TokenError,
    WeakPasswordError,
)
from nextera_utils.models import (
    CacheData,
    ResponseData,
    ResponseMessage,
    ServiceResponse,
)
from nextera_utils.schemas import IssuedToken, UnverifiedClaims, VerifiedClaims
from nextera_utils.services import (
    Argon2Params,
    BcryptParams,
    JWTService,
    PasswordHasherType,
    PasswordHashingService,
    extract_claims_unverified,
    extract_user_id_unverified,
    generate_strong_password,
    hash_password,
    issue_token,
    validate_token,
    verify_password,
)

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    "PasswordHasherType",
    "Argon2Params",
    "BcryptParams",
    "issue_token",
    "validate_token",
    "extract_claims_unverified",
    "extract_user_id_unverified",
    "hash_password",
    "verify_password",
    "generate_strong_password",
    # Schemas
    "IssuedToken",
    "VerifiedClaims",
    "UnverifiedClaims",
    # Models
    "CacheData",
    "ResponseData",
    "ResponseMessage",
    "ServiceResponse",
    # Exceptions
    "ErrorCode",
    "NexteraError",
    "TokenError",
    "MalformedTokenError",
    "InvalidTokenError",
    "TokenEncodingError",
    "PasswordError",
    "HashingError",
    "InvalidHashFormatError",
    "WeakPasswordError",
    "ContractViolationError",
]
