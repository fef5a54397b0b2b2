"""Random password generation."""

import secrets
import string

from nextera_utils.exceptions import ContractViolationError

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARS = "!@#$%^&*()_+{}[]:;<>,.?/|~`"

MIN_LENGTH = 4

_ALL_CHARS = LOWERCASE + UPPERCASE + DIGITS + SPECIAL_CHARS


def generate_strong_password(length: int) -> str:
    """Generate a random password of exactly ``length`` characters.

    The result contains at least one lowercase letter, one uppercase
    letter, one digit and one character from ``SPECIAL_CHARS``. The other
    positions are drawn uniformly from all four classes, then the whole
    sequence is shuffled so the guaranteed characters have no fixed
    position.

    Raises
    ------
    ContractViolationError
        If ``length`` is below 4
    """
    if length < MIN_LENGTH:
        msg = f"Password length must be at least {MIN_LENGTH} to ensure complexity."
        raise ContractViolationError(msg, details={"length": length})

    rng = secrets.SystemRandom()
    chars = [
        rng.choice(LOWERCASE),
        rng.choice(UPPERCASE),
        rng.choice(DIGITS),
        rng.choice(SPECIAL_CHARS),
    ]
    chars.extend(rng.choice(_ALL_CHARS) for _ in range(length - MIN_LENGTH))
    rng.shuffle(chars)
    return "".join(chars)
