from .base import KDF  # noqa
from credkit.settings import settings


def get_kdf(name: str | None = None) -> KDF:
    """
    Get the hashing backend, defaulting to `KDF_BACKEND`.

        kdf = get_kdf()
        salt = kdf.gen_salt(kdf.default_config())
        encoded = kdf.hash("difficult2guess", salt)
    """
    return KDF.get_instance(name or settings.KDF_BACKEND)
