"""Timing helpers for picking a cost parameter.

Raising the cost makes each hash slower, which limits how many guesses an
attacker can make in a given time. These helpers show what a cost means on
the current hardware. They are not used by the verification path.
"""

import time

from pydantic import BaseModel

from credkit.config import BcryptConfig, Pbkdf2Config, build_config
from credkit.kdf import KDF, get_kdf
from credkit.logger import logger


def time_hash(kdf: KDF, config: BaseModel | None = None) -> int:
    """Return the time in milliseconds taken by one hash at this cost."""
    salt = kdf.gen_salt(config)
    start = time.perf_counter()
    kdf.hash("password", salt)
    return int((time.perf_counter() - start) * 1000)


def time_bcrypt(log_rounds: int = 12) -> int:
    """Time bcrypt. Log rounds go from 4 to 31, the default is 12."""
    config = build_config(BcryptConfig, log_rounds=log_rounds)
    elapsed = time_hash(get_kdf("bcrypt"), config)
    logger.info(f"Log rounds: {log_rounds}, Time: {elapsed} ms")
    return elapsed


def time_pbkdf2(rounds: int = 160_000) -> int:
    """Time pbkdf2_sha512. Rounds go up to 4294967295, the default is 160_000."""
    config = build_config(Pbkdf2Config, rounds=rounds)
    elapsed = time_hash(get_kdf("pbkdf2"), config)
    logger.info(f"Rounds: {rounds}, Time: {elapsed} ms")
    return elapsed
