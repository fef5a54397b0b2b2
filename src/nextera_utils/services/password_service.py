"""Password hashing service using Argon2 or bcrypt.

Hashes are self-describing strings (PHC ``$argon2id$...`` or modular crypt
``$2b$...``) so they can be verified later, by this library or any other
standard implementation, without storing parameters separately.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

import argon2
import bcrypt
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from nextera_utils.exceptions import (
    HashingError,
    InvalidHashFormatError,
    WeakPasswordError,
)

if TYPE_CHECKING:
    from nextera_config import Settings

logger = logging.getLogger(__name__)

_BCRYPT_PREFIX = re.compile(r"\$2[abxy]\$")
_BCRYPT_RECORD = re.compile(r"\$2[abxy]\$(\d{2})\$[./A-Za-z0-9]{53}")

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasherType(str, Enum):
    """Supported password hashing families."""

    ARGON2 = "argon2"
    BCRYPT = "bcrypt"


@dataclass(frozen=True)
class Argon2Params:
    """Argon2id work parameters (argon2-cffi defaults, RFC 9106 low memory)."""

    time_cost: int = 3
    memory_cost: int = 65536
    parallelism: int = 4
    hash_len: int = 32
    salt_len: int = 16


@dataclass(frozen=True)
class BcryptParams:
    """bcrypt work factor (log2 of iterations)."""

    rounds: int = 12


class _Argon2Backend:
    family = PasswordHasherType.ARGON2

    def __init__(self, params: Argon2Params):
        self._hasher = argon2.PasswordHasher(
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.hash_len,
            salt_len=params.salt_len,
        )

    @staticmethod
    def identifies(password_hash: str) -> bool:
        return password_hash.startswith("$argon2")

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except Argon2HashingError as e:
            raise HashingError(f"Argon2 hashing failed: {e}") from e

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            argon2.extract_parameters(password_hash)
        except InvalidHashError as e:
            raise InvalidHashFormatError(details={"error": str(e)}) from e
        _check_salt_and_digest(password_hash)

        try:
            return self._hasher.verify(password_hash, password)
        except VerifyMismatchError:
            return False
        except InvalidHashError as e:
            raise InvalidHashFormatError(details={"error": str(e)}) from e
        except VerificationError as e:
            raise InvalidHashFormatError(details={"error": str(e)}) from e

    def needs_rehash(self, password_hash: str) -> bool:
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True


def _check_salt_and_digest(password_hash: str) -> None:
    """Check the last two PHC segments are non-empty unpadded base64."""
    for segment in password_hash.split("$")[-2:]:
        try:
            if not segment:
                raise ValueError("empty segment")
            base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidHashFormatError(details={"error": f"salt or digest: {e}"}) from e


def _bcrypt_input(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class _BcryptBackend:
    family = PasswordHasherType.BCRYPT

    def __init__(self, params: BcryptParams):
        self._rounds = params.rounds

    @staticmethod
    def identifies(password_hash: str) -> bool:
        return _BCRYPT_PREFIX.match(password_hash) is not None

    def hash(self, password: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(_bcrypt_input(password), salt)
        except ValueError as e:
            raise HashingError(f"bcrypt hashing failed: {e}") from e
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not _BCRYPT_RECORD.fullmatch(password_hash):
            raise InvalidHashFormatError()
        try:
            return bcrypt.checkpw(
                _bcrypt_input(password),
                password_hash.encode("utf-8"),
            )
        except ValueError as e:
            raise HashingError(f"bcrypt verification failed: {e}") from e

    def needs_rehash(self, password_hash: str) -> bool:
        match = _BCRYPT_RECORD.fullmatch(password_hash)
        if match is None:
            return True
        return int(match.group(1)) != self._rounds


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses Argon2id by default, bcrypt on request. Salts are generated by the
    underlying libraries from the operating system's CSPRNG, so hashing the
    same password twice gives two different records.

    No length or complexity policy is applied when hashing; call
    ``validate_strength`` first if the caller needs one.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # Password requirements for validate_strength
    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(
        self,
        default_algorithm: PasswordHasherType = PasswordHasherType.ARGON2,
        argon2_params: Argon2Params | None = None,
        bcrypt_params: BcryptParams | None = None,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        default_algorithm
            Family used when ``hash``/``verify`` are called without one
        argon2_params
            Argon2 work parameters, argon2-cffi defaults if omitted
        bcrypt_params
            bcrypt work factor, 12 if omitted
        """
        self._default_algorithm = PasswordHasherType(default_algorithm)
        self._backends = {
            PasswordHasherType.ARGON2: _Argon2Backend(argon2_params or Argon2Params()),
            PasswordHasherType.BCRYPT: _BcryptBackend(bcrypt_params or BcryptParams()),
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordHashingService:
        """Build a service from application settings."""
        return cls(
            default_algorithm=PasswordHasherType(settings.password_hasher),
            argon2_params=Argon2Params(
                time_cost=settings.argon2_time_cost,
                memory_cost=settings.argon2_memory_cost,
                parallelism=settings.argon2_parallelism,
            ),
            bcrypt_params=BcryptParams(rounds=settings.bcrypt_rounds),
        )

    @property
    def default_algorithm(self) -> PasswordHasherType:
        return self._default_algorithm

    def hash(
        self,
        password: str,
        algorithm: PasswordHasherType | None = None,
    ) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash (may be empty)
        algorithm
            Hashing family, the service default if omitted

        Returns
        -------
        The encoded hash record

        Raises
        ------
        HashingError
            If the hashing library fails
        """
        backend = self._backend(algorithm)
        try:
            return backend.hash(password)
        except HashingError:
            logger.exception("Password hashing failed (%s)", backend.family.value)
            raise

    def verify(
        self,
        password: str,
        password_hash: str,
        algorithm: PasswordHasherType | None = None,
    ) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The stored hash record
        algorithm
            Family the record was produced with, the service default if
            omitted

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        InvalidHashFormatError
            If the record is malformed or was produced by another family
        """
        backend = self._backend(algorithm)
        actual = self.identify(password_hash)
        if actual is not backend.family:
            msg = f"Expected a {backend.family.value} hash, got a {actual.value} hash"
            raise InvalidHashFormatError(msg)
        return backend.verify(password, password_hash)

    def identify(self, password_hash: str) -> PasswordHasherType:
        """Return the family of a hash record from its prefix.

        Raises
        ------
        InvalidHashFormatError
            If the prefix matches no supported family
        """
        for backend in self._backends.values():
            if backend.identifies(password_hash):
                return backend.family
        raise InvalidHashFormatError()

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash needs to be rehashed.

        True when the record was produced by another family than the
        default, with other work parameters, or cannot be parsed. Useful to
        upgrade stored hashes on next login.
        """
        try:
            family = self.identify(password_hash)
        except InvalidHashFormatError:
            return True
        if family is not self._default_algorithm:
            return True
        return self._backends[family].needs_rehash(password_hash)

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 8 characters
        - Maximum 128 characters

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def _backend(self, algorithm: PasswordHasherType | None) -> _Argon2Backend | _BcryptBackend:
        return self._backends[PasswordHasherType(algorithm or self._default_algorithm)]


@lru_cache
def _default_service() -> PasswordHashingService:
    return PasswordHashingService()


def hash_password(
    password: str,
    algorithm: PasswordHasherType = PasswordHasherType.ARGON2,
) -> str:
    """Hash ``password`` with default work parameters."""
    return _default_service().hash(password, algorithm)


def verify_password(
    password_hash: str,
    password: str,
    algorithm: PasswordHasherType = PasswordHasherType.ARGON2,
) -> bool:
    """Verify ``password`` against ``password_hash`` of the given family."""
    return _default_service().verify(password, password_hash, algorithm)
