"""Show how long one hash takes at a given cost.

Usage:
    python -m credkit.tools.time_hash --backend bcrypt --cost 12
    python -m credkit.tools.time_hash --backend pbkdf2 --cost 160000
"""

import argparse
import sys

from credkit.benchmark import time_bcrypt, time_pbkdf2
from credkit.errors import InvalidConfigError
from credkit.logger import configure_logging
from credkit.settings import settings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Time one password hash")
    parser.add_argument(
        "--backend",
        choices=["bcrypt", "pbkdf2"],
        default=settings.KDF_BACKEND,
        help="Hashing backend (default: KDF_BACKEND)",
    )
    parser.add_argument(
        "--cost",
        type=int,
        help="bcrypt log rounds or pbkdf2 rounds (default: from settings)",
    )
    args = parser.parse_args(argv)

    configure_logging()

    try:
        if args.backend == "bcrypt":
            cost = settings.BCRYPT_LOG_ROUNDS if args.cost is None else args.cost
            elapsed = time_bcrypt(cost)
        else:
            cost = settings.PBKDF2_ROUNDS if args.cost is None else args.cost
            elapsed = time_pbkdf2(cost)
    except InvalidConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print(f"{elapsed} ms")


if __name__ == "__main__":
    main()
