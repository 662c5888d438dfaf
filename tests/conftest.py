import pytest

from credkit.config import BcryptConfig, Pbkdf2Config
from credkit.kdf import get_kdf
from credkit.verifier import CredentialVerifier


# cheapest costs the backends accept, so the suite stays fast
@pytest.fixture
def bcrypt_config():
    return BcryptConfig(log_rounds=4)


@pytest.fixture
def pbkdf2_config():
    return Pbkdf2Config(rounds=1000)


@pytest.fixture(params=["bcrypt", "pbkdf2"])
def verifier(request, bcrypt_config, pbkdf2_config):
    config = {"bcrypt": bcrypt_config, "pbkdf2": pbkdf2_config}[request.param]
    return CredentialVerifier(get_kdf(request.param), config)


@pytest.fixture(autouse=True)
def cheap_settings(monkeypatch):
    from credkit.settings import settings

    monkeypatch.setattr(settings, "KDF_BACKEND", "bcrypt")
    monkeypatch.setattr(settings, "BCRYPT_LOG_ROUNDS", 4)
    monkeypatch.setattr(settings, "PBKDF2_ROUNDS", 1000)
    monkeypatch.setattr(settings, "PASS_LENGTH", 12)
    monkeypatch.setattr(settings, "PASS_MIN_LENGTH", None)
