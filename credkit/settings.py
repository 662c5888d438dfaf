from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# upper bound of a PBKDF2 iteration count (32-bit unsigned)
PBKDF2_MAX_ROUNDS = 4_294_967_295


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hashing backend
    # backends: bcrypt, pbkdf2
    KDF_BACKEND: Literal["bcrypt", "pbkdf2"] = "bcrypt"

    # bcrypt: cost is 2**BCRYPT_LOG_ROUNDS
    BCRYPT_LOG_ROUNDS: int = Field(default=12, ge=4, le=31)

    # pbkdf2_sha512
    PBKDF2_ROUNDS: int = Field(default=160_000, ge=1, le=PBKDF2_MAX_ROUNDS)
    PBKDF2_SALT_LENGTH: int = Field(default=16, ge=8)

    # Generated passwords
    PASS_LENGTH: int = Field(default=12, ge=2)
    PASS_MIN_LENGTH: int | None = Field(default=None, ge=1)

    LOG_LEVEL: str = "INFO"


settings = Settings()
