"""Explicit per-call configuration.

`settings` only provides defaults: every hashing or generation call takes one
of these frozen models, so behavior does not depend on process-wide state.
"""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from credkit.errors import InvalidConfigError
from credkit.settings import PBKDF2_MAX_ROUNDS, Settings, settings


class BcryptConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_rounds: int = Field(default=12, ge=4, le=31)

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "BcryptConfig":
        return build_config(cls, log_rounds=s.BCRYPT_LOG_ROUNDS)


class Pbkdf2Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    rounds: int = Field(default=160_000, ge=1, le=PBKDF2_MAX_ROUNDS)
    salt_length: int = Field(default=16, ge=8)

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "Pbkdf2Config":
        return build_config(
            cls, rounds=s.PBKDF2_ROUNDS, salt_length=s.PBKDF2_SALT_LENGTH
        )


class PasswordPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    # two is the shortest password that can hold a digit and a punctuation char
    length: int = Field(default=12, ge=2)
    min_length: int | None = Field(default=None, ge=1)

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "PasswordPolicy":
        return build_config(cls, length=s.PASS_LENGTH, min_length=s.PASS_MIN_LENGTH)


T_Config = TypeVar("T_Config", bound=BaseModel)


def build_config(config_class: type[T_Config], **values) -> T_Config:
    """Construct a config model, reporting range errors as InvalidConfigError."""
    try:
        return config_class(**values)
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid {config_class.__name__}: {e}") from e
