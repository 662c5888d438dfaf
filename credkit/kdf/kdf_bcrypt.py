import re

import bcrypt

from credkit.config import BcryptConfig
from credkit.errors import MalformedHashError, RngUnavailableError
from credkit.kdf.base import KDF

# $2b$12$ + 22 chars of salt + 31 chars of digest
BCRYPT_HASH_RE = re.compile(r"^(\$2[abxy]\$(\d{2})\$[./A-Za-z0-9]{22})[./A-Za-z0-9]{31}$")
MAX_PASSWORD_BYTES = 72


class BcryptKDF(KDF):
    config_class = BcryptConfig

    def default_config(self) -> BcryptConfig:
        return BcryptConfig.from_settings()

    def _gen_salt(self, config: BcryptConfig) -> str:
        try:
            return bcrypt.gensalt(rounds=config.log_rounds).decode("ascii")
        except (OSError, NotImplementedError) as e:
            raise RngUnavailableError("Secure random source is unavailable") from e

    def hash(self, password: str, salt: str) -> str:
        # bcrypt only reads the first 72 bytes, newer releases raise instead
        secret = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(secret, salt.encode("ascii")).decode("ascii")

    def parse_salt(self, encoded: str) -> str:
        match = BCRYPT_HASH_RE.match(encoded)
        if match is None:
            raise MalformedHashError("Not a bcrypt hash")
        if not 4 <= int(match.group(2)) <= 31:
            raise MalformedHashError("bcrypt log rounds out of range")
        return match.group(1)


KDF.register("bcrypt", BcryptKDF)
