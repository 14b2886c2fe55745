from typing import Optional


class JournalError(Exception):
    """Base class for every failure a journal action can report to the user."""


class ConfigurationError(JournalError):
    """A required endpoint URL is not configured."""


class ValidationError(JournalError):
    """A required field is missing when an action is invoked."""


class FileReadError(JournalError):
    """The selected local file could not be read."""

    def __init__(self, message: str = "Failed to read file"):
        super().__init__(message)


class RemoteCallError(JournalError):
    """The remote endpoint answered with a failure status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
