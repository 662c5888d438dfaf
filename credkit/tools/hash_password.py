"""Hash a password, or check one against a stored hash.

Usage:
    python -m credkit.tools.hash_password --password <pass>
    python -m credkit.tools.hash_password  # prompts for password
    python -m credkit.tools.hash_password --backend pbkdf2 --check '<hash>'
"""

import argparse
import getpass
import sys

from credkit.errors import InvalidConfigError
from credkit.logger import configure_logging
from credkit.password import valid_password
from credkit.settings import settings
from credkit.verifier import get_verifier


def main(argv=None):
    parser = argparse.ArgumentParser(description="Hash or check a password")
    parser.add_argument(
        "--password",
        help="Password (will prompt if not provided)",
    )
    parser.add_argument(
        "--backend",
        choices=["bcrypt", "pbkdf2"],
        default=settings.KDF_BACKEND,
        help="Hashing backend (default: KDF_BACKEND)",
    )
    parser.add_argument(
        "--check",
        metavar="HASH",
        help="Check the password against this hash, exit 0 on match and 1 otherwise",
    )
    args = parser.parse_args(argv)

    configure_logging()

    password = args.password
    if not password:
        password = getpass.getpass("Password: ")
        if not args.check:
            confirm = getpass.getpass("Confirm password: ")
            if password != confirm:
                print("Passwords do not match", file=sys.stderr)
                sys.exit(1)

    if not password:
        print("Password cannot be empty", file=sys.stderr)
        sys.exit(1)

    try:
        verifier = get_verifier(args.backend)
    except InvalidConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if args.check:
        if verifier.checkpw(password, args.check):
            print("Password matches")
            sys.exit(0)
        print("Password does not match", file=sys.stderr)
        sys.exit(1)

    if not valid_password(password):
        print(
            "Warning: password should contain a digit and a punctuation character",
            file=sys.stderr,
        )
    print(verifier.hashpwsalt(password))


if __name__ == "__main__":
    main()
