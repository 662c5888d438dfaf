"""Print randomly generated passwords.

Usage:
    python -m credkit.tools.gen_password
    python -m credkit.tools.gen_password --length 20 --count 5
"""

import argparse
import sys

from credkit.config import PasswordPolicy, build_config
from credkit.errors import InvalidConfigError
from credkit.logger import configure_logging
from credkit.password import gen_password
from credkit.settings import settings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate random passwords")
    parser.add_argument(
        "--length",
        type=int,
        default=settings.PASS_LENGTH,
        help="Password length (default: PASS_LENGTH)",
    )
    parser.add_argument(
        "--count", type=int, default=1, help="Number of passwords to print"
    )
    args = parser.parse_args(argv)

    configure_logging()

    try:
        policy = build_config(PasswordPolicy, length=args.length)
    except InvalidConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    for _ in range(args.count):
        print(gen_password(policy=policy))


if __name__ == "__main__":
    main()
