from __future__ import annotations


class ScientistError(Exception):
    """Base class for errors raised by openai_scientist."""


class CredentialMissingError(ScientistError):
    """No usable API key was supplied. Raised before any network call."""

    def __init__(self, message: str = "API key not found. Please provide a valid OpenAI API key.") -> None:
        super().__init__(message)


class EmptyCompletionError(ScientistError):
    """The completion reply carried no choices or no message content."""

    def __init__(self, message: str = "No content returned from OpenAI API.") -> None:
        super().__init__(message)


# Names used by callers that think in terms of the remote service.
AuthenticationError = CredentialMissingError
ServiceError = EmptyCompletionError
