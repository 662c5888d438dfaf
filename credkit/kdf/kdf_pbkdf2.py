"""pbkdf2_sha512 on top of hashlib.

Encoded hashes use the passlib layout so they can be verified elsewhere:

    $pbkdf2-sha512$<rounds>$<salt>$<digest>

salt and digest are in "adapted base64" (standard base64 with `.` instead of
`+`, no padding).
"""

import base64
import binascii
import hashlib
import secrets

from credkit.config import Pbkdf2Config
from credkit.errors import InvalidConfigError, MalformedHashError, RngUnavailableError
from credkit.kdf.base import KDF
from credkit.settings import PBKDF2_MAX_ROUNDS

IDENT = "pbkdf2-sha512"
DIGEST_LENGTH = 64

# hashlib.pbkdf2_hmac takes a signed 32-bit iteration count
HASHLIB_MAX_ROUNDS = 2**31 - 1


def ab64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=").replace("+", ".")


def ab64_decode(data: str) -> bytes:
    padded = data.replace(".", "+") + "=" * (-len(data) % 4)
    return base64.b64decode(padded.encode("ascii"), validate=True)


class Pbkdf2KDF(KDF):
    config_class = Pbkdf2Config

    def default_config(self) -> Pbkdf2Config:
        return Pbkdf2Config.from_settings()

    def check_config(self, config: Pbkdf2Config | None) -> Pbkdf2Config:
        config = super().check_config(config)
        if config.rounds > HASHLIB_MAX_ROUNDS:
            raise InvalidConfigError(
                f"pbkdf2_sha512 rounds must be at most {HASHLIB_MAX_ROUNDS}, got {config.rounds}"
            )
        return config

    def _gen_salt(self, config: Pbkdf2Config) -> str:
        try:
            raw_salt = secrets.token_bytes(config.salt_length)
        except (OSError, NotImplementedError) as e:
            raise RngUnavailableError("Secure random source is unavailable") from e
        return f"${IDENT}${config.rounds}${ab64_encode(raw_salt)}"

    def hash(self, password: str, salt: str) -> str:
        rounds, raw_salt = self._split_salt(salt)
        dk = hashlib.pbkdf2_hmac(
            "sha512",
            password.encode("utf-8"),
            raw_salt,
            rounds,
            DIGEST_LENGTH,
        )
        return f"{salt}${ab64_encode(dk)}"

    def parse_salt(self, encoded: str) -> str:
        salt, sep, digest = encoded.rpartition("$")
        if not sep or not digest:
            raise MalformedHashError("Not a pbkdf2_sha512 hash")
        try:
            raw_digest = ab64_decode(digest)
        except (binascii.Error, ValueError) as e:
            raise MalformedHashError("Invalid pbkdf2_sha512 digest") from e
        if len(raw_digest) != DIGEST_LENGTH:
            raise MalformedHashError("Invalid pbkdf2_sha512 digest length")
        self._split_salt(salt)
        return salt

    def _split_salt(self, salt: str) -> tuple[int, bytes]:
        parts = salt.split("$")
        if len(parts) != 4 or parts[0] != "" or parts[1] != IDENT:
            raise MalformedHashError("Not a pbkdf2_sha512 salt")
        _, _, rounds_str, salt_str = parts
        if not (rounds_str.isascii() and rounds_str.isdigit()):
            raise MalformedHashError("Invalid pbkdf2_sha512 rounds")
        rounds = int(rounds_str)
        if not 1 <= rounds <= min(PBKDF2_MAX_ROUNDS, HASHLIB_MAX_ROUNDS):
            raise MalformedHashError("pbkdf2_sha512 rounds out of range")
        try:
            raw_salt = ab64_decode(salt_str)
        except (binascii.Error, ValueError) as e:
            raise MalformedHashError("Invalid pbkdf2_sha512 salt") from e
        if not raw_salt:
            raise MalformedHashError("Empty pbkdf2_sha512 salt")
        return rounds, raw_salt


KDF.register("pbkdf2", Pbkdf2KDF)
