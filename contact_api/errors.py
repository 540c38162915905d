class ContactAPIError(Exception):
    """Base class for every failure raised by the insert pipeline."""


class ConfigError(ContactAPIError):
    """Unknown record kind or a misconfigured schema entry. Not retryable."""


class ValidationError(ContactAPIError):
    """Incomplete or malformed input. The caller has to fix the payload."""


class StorageError(ContactAPIError):
    """The database rejected the insert or could not be reached."""
