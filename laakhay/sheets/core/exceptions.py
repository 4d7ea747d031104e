"""Custom exception hierarchy."""

from __future__ import annotations


class SheetsError(Exception):
    """Base exception for all library errors."""

    def __init__(self, message: str, identity: str | None = None) -> None:
        super().__init__(message)
        self.identity = identity


class ValidationError(SheetsError):
    """Request options failed validation before any network activity."""

    pass


class MalformedURLError(ValidationError):
    """URL does not match any known sheet generation."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class MissingKeyOrGidError(ValidationError):
    """Sheet key or gid could not be determined."""

    pass


class NoOutputError(ValidationError):
    """Neither a render target nor a callback was supplied."""

    pass


class PriorFailureError(ValidationError):
    """A previous request for the same identity failed."""

    pass


class AlreadyLoadedError(ValidationError):
    """Every row for this identity has already been loaded."""

    pass


class ProviderError(SheetsError):
    """Error from the spreadsheet service."""

    def __init__(
        self,
        message: str,
        identity: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, identity=identity)
        self.status_code = status_code


class TransportError(ProviderError):
    """Request failed: network error, timeout or non-200 status."""

    pass


class UnexpectedFormatError(ProviderError):
    """Response does not carry the expected status/table structure."""

    pass


class ParseError(SheetsError):
    """Decoding the response or rendering a row failed."""

    pass
