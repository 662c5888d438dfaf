"""Random password generation and password strength checks.

Generated passwords are drawn from a fixed 80 character alphabet and always
contain at least one digit and one punctuation character.
"""

import re
import secrets
import string
from dataclasses import dataclass

from credkit.config import PasswordPolicy
from credkit.errors import (
    InvalidConfigError,
    PasswordGenerationError,
    RngUnavailableError,
)
from credkit.logger import logger

PUNCTUATION = "!#$%&'()*+,-./:;<="
ALPHABET = PUNCTUATION + string.ascii_uppercase + string.ascii_lowercase + string.digits

# index partition of ALPHABET: [0, 18) punctuation, [18, 70) letters, [70, 80) digits
FIRST_LETTER = len(PUNCTUATION)
FIRST_DIGIT = FIRST_LETTER + len(string.ascii_letters)
ALPHABET_SIZE = len(ALPHABET)

# a 2 character draw is accepted with p = 0.056, so this bound is never hit in practice
MAX_DRAW_ATTEMPTS = 10_000

_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class Accepted:
    chars: str


@dataclass(frozen=True)
class Rejected:
    pass


def _rand_indices(length: int) -> list[int]:
    try:
        return [secrets.randbelow(ALPHABET_SIZE) for _ in range(length)]
    except (OSError, NotImplementedError) as e:
        raise RngUnavailableError("Secure random source is unavailable") from e


def _draw(length: int) -> Accepted | Rejected:
    indices = _rand_indices(length)
    has_punctuation = any(i < FIRST_LETTER for i in indices)
    has_digit = any(i >= FIRST_DIGIT for i in indices)
    if not (has_punctuation and has_digit):
        return Rejected()
    return Accepted("".join(ALPHABET[i] for i in indices))


def gen_password(length: int | None = None, policy: PasswordPolicy | None = None) -> str:
    """Randomly generate a password.

    The length defaults to the policy length (12 unless configured). The
    result is guaranteed to contain at least one digit and one punctuation
    character: draws that miss either class are thrown away as a whole.
    """
    policy = policy or PasswordPolicy.from_settings()
    if length is None:
        length = policy.length
    elif length < 2:
        raise InvalidConfigError(
            f"Password length must be at least 2 to hold a digit and a punctuation character, got {length}"
        )

    for attempt in range(1, MAX_DRAW_ATTEMPTS + 1):
        outcome = _draw(length)
        if isinstance(outcome, Accepted):
            if attempt > 1:
                logger.debug(f"Generated password after {attempt} draws", length=length)
            return outcome.chars

    raise PasswordGenerationError(
        f"No acceptable password drawn in {MAX_DRAW_ATTEMPTS} attempts"
    )


def valid_password(password: str, policy: PasswordPolicy | None = None) -> bool:
    """Check that a password contains a digit and a punctuation character.

    Any character outside A-Z, a-z and 0-9 counts as punctuation, including
    whitespace. When the policy sets a minimum length it is enforced as well.
    Works on arbitrary strings, not only on `gen_password` output.
    """
    policy = policy or PasswordPolicy.from_settings()
    if policy.min_length is not None and len(password) < policy.min_length:
        return False
    return bool(_DIGIT_RE.search(password)) and bool(_SYMBOL_RE.search(password))
