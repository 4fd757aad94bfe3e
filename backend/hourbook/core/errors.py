class HourbookError(Exception):
    """Base error carrying a message that is safe to show to the user."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(HourbookError):
    """Bad caller input: missing week key, non-positive rate, ..."""

    status_code = 400


class StorageError(HourbookError):
    """The store was unreachable or a query failed."""

    status_code = 500


class ConfigurationError(HourbookError):
    """Raised at construction time, e.g. when no database URL is configured."""
