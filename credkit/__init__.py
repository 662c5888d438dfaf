"""Password hashing helpers on top of bcrypt and pbkdf2_sha512.

Most users only need `hashpwsalt`, `checkpw` and `dummy_checkpw`:

    stored = hashpwsalt("difficult2guess")
    checkpw("difficult2guess", stored)  # True
    dummy_checkpw()                     # False, for unknown usernames

The backend comes from `KDF_BACKEND` ("bcrypt" by default). Use
`CredentialVerifier` directly to pick a backend and cost per call.
"""

from credkit.benchmark import time_bcrypt, time_hash, time_pbkdf2  # noqa
from credkit.config import BcryptConfig, PasswordPolicy, Pbkdf2Config  # noqa
from credkit.errors import (  # noqa
    CredkitError,
    InvalidConfigError,
    MalformedHashError,
    PasswordGenerationError,
    RngUnavailableError,
)
from credkit.password import gen_password, valid_password  # noqa
from credkit.utils.secure_compare import secure_check  # noqa
from credkit.verifier import (  # noqa
    CredentialVerifier,
    HashedPassword,
    checkpw,
    dummy_checkpw,
    get_verifier,
    hash_and_salt,
    hashpwsalt,
)
