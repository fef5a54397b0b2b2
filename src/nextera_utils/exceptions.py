"""Error codes and exceptions raised by nextera_utils.

Every exception carries a stable ``code`` and optional ``details``. Details
are meant for logs and diagnostics only; messages are safe to show to end
users and never reveal why a token was rejected.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers.

    These codes are part of the public API contract. Should not be changed.
    """

    # Tokens
    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_ENCODING_FAILED = "TOKEN_ENCODING_FAILED"

    # Passwords
    HASHING_FAILED = "HASHING_FAILED"
    INVALID_HASH_FORMAT = "INVALID_HASH_FORMAT"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Programmer errors
    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"


class NexteraError(Exception):  # NOQA: N818
    """Base exception for all nextera_utils errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class TokenError(NexteraError):
    """Base exception for token issuance, validation and extraction."""


class MalformedTokenError(TokenError):
    """Raised when an unverified token cannot be split, decoded or parsed."""

    def __init__(
        self,
        message: str = "Malformed token",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.MALFORMED_TOKEN, details)


class InvalidTokenError(TokenError):
    """Raised when a token fails validation.

    Bad signatures, expired tokens, audience mismatches and malformed
    tokens all produce the same message. The concrete reason is only
    available in ``details["reason"]``.
    """

    def __init__(
        self,
        message: str = "Invalid or expired token",
        reason: str | None = None,
    ):
        details = {"reason": reason} if reason else None
        super().__init__(message, ErrorCode.INVALID_TOKEN, details)

    @property
    def reason(self) -> str | None:
        return self.details.get("reason")


class TokenEncodingError(TokenError):
    """Raised when a token cannot be signed or serialized.

    Usually points at an unusable key or environment, not at user input.
    """

    def __init__(
        self,
        message: str = "Failed to encode token",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.TOKEN_ENCODING_FAILED, details)


class PasswordError(NexteraError):
    """Base exception for password hashing and verification."""


class HashingError(PasswordError):
    """Raised when the underlying hashing library fails."""

    def __init__(
        self,
        message: str = "Password hashing failed",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.HASHING_FAILED, details)


class InvalidHashFormatError(PasswordError):
    """Raised when a stored hash is malformed or belongs to another family."""

    def __init__(
        self,
        message: str = "Invalid password hash format",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.INVALID_HASH_FORMAT, details)


class WeakPasswordError(PasswordError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class ContractViolationError(NexteraError, ValueError):
    """Raised when a caller breaks a precondition (programmer error).

    Never caught inside the library; fail fast.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, ErrorCode.CONTRACT_VIOLATION, details)
