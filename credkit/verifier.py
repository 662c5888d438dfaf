"""Hashing and verification entry points.

There are three, and the caller has to pick the right one:

- `hashpwsalt` / `hash_and_salt` when storing a new password,
- `checkpw` when the user was found and has a stored hash,
- `dummy_checkpw` when the user was not found. It does the same amount of
  hashing work as `checkpw` and always returns False, so the response time
  does not reveal whether the username exists.

Skipping `dummy_checkpw` on a failed lookup brings the timing leak back.
"""

from typing import NamedTuple

from pydantic import BaseModel

from credkit.kdf import KDF, get_kdf
from credkit.logger import logger
from credkit.utils.secure_compare import secure_check

DUMMY_PASSWORD = "password"


class HashedPassword(NamedTuple):
    hash: str
    salt: str


class CredentialVerifier:
    def __init__(self, kdf: KDF, config: BaseModel | None = None):
        self.kdf = kdf
        self.config = kdf.check_config(config)
        self.logger = logger.bind(kdf=kdf.name)

    def hash_and_salt(
        self, password: str, config: BaseModel | None = None
    ) -> HashedPassword:
        salt = self.kdf.gen_salt(self._config(config))
        return HashedPassword(hash=self.kdf.hash(password, salt), salt=salt)

    def hashpwsalt(self, password: str, config: BaseModel | None = None) -> str:
        """Generate a salt and hash a password. Only the result needs storing."""
        return self.hash_and_salt(password, config).hash

    def checkpw(self, password: str, stored_hash: str) -> bool:
        """Check the password against the stored hash.

        A stored hash that cannot be parsed gives False, exactly like a wrong
        password, after doing the same amount of hashing work.
        """
        try:
            if not isinstance(stored_hash, str):
                raise TypeError("stored hash must be a string")
            salt = self.kdf.parse_salt(stored_hash)
            candidate = self.kdf.hash(password, salt)
        except (TypeError, ValueError, OverflowError):
            self.logger.debug("Unusable stored hash, treated as a mismatch")
            self.dummy_checkpw()
            return False

        return secure_check(candidate.encode("utf-8"), stored_hash.encode("utf-8"))

    def dummy_checkpw(self, config: BaseModel | None = None) -> bool:
        """Hash a dummy password and return False.

        Use when the user cannot be found. This only helps if usernames are
        not public and are hard to guess.
        """
        salt = self.kdf.gen_salt(self._config(config))
        self.kdf.hash(DUMMY_PASSWORD, salt)
        return False

    def _config(self, config: BaseModel | None) -> BaseModel:
        if config is None:
            return self.config
        return self.kdf.check_config(config)


def get_verifier(
    name: str | None = None, config: BaseModel | None = None
) -> CredentialVerifier:
    return CredentialVerifier(get_kdf(name), config)


def hash_and_salt(password: str, config: BaseModel | None = None) -> HashedPassword:
    return get_verifier().hash_and_salt(password, config)


def hashpwsalt(password: str, config: BaseModel | None = None) -> str:
    return get_verifier().hashpwsalt(password, config)


def checkpw(password: str, stored_hash: str) -> bool:
    return get_verifier().checkpw(password, stored_hash)


def dummy_checkpw(config: BaseModel | None = None) -> bool:
    return get_verifier().dummy_checkpw(config)
