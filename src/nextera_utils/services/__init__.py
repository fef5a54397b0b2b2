"""Authentication services.

Provides JWT token management, password hashing and password generation.
"""

from nextera_utils.services.jwt_service import (
    JWTService,
    extract_claims_unverified,
    extract_user_id_unverified,
    issue_token,
    normalize_base64,
    validate_token,
)
from nextera_utils.services.password_generator import (
    SPECIAL_CHARS,
    generate_strong_password,
)
from nextera_utils.services.password_service import (
    Argon2Params,
    BcryptParams,
    PasswordHasherType,
    PasswordHashingService,
    hash_password,
    verify_password,
)

__all__ = [
    # JWT
    "JWTService",
    "extract_claims_unverified",
    "extract_user_id_unverified",
    "issue_token",
    "normalize_base64",
    "validate_token",
    # Passwords
    "Argon2Params",
    "BcryptParams",
    "PasswordHasherType",
    "PasswordHashingService",
    "SPECIAL_CHARS",
    "generate_strong_password",
    "hash_password",
    "verify_password",
]
