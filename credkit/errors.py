class CredkitError(Exception):
    pass


class InvalidConfigError(CredkitError, ValueError):
    """Cost parameter or policy out of range, rejected before any hashing."""


class MalformedHashError(CredkitError, ValueError):
    """Stored hash cannot be parsed into algorithm, cost, salt and digest.

    Never escapes `checkpw`, which treats it as a plain mismatch.
    """


class RngUnavailableError(CredkitError, RuntimeError):
    """The OS random source failed. Fatal, there is no weaker fallback."""


class PasswordGenerationError(CredkitError, RuntimeError):
    pass
