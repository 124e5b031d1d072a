"""Exception classes for the packagecloud client."""

from __future__ import annotations


class PackagecloudError(Exception):
    """Base exception for all packagecloud client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CredentialsError(PackagecloudError):
    """Credentials could not be loaded.

    Raised when the credentials file exists but cannot be parsed.
    """


class CredentialsMissingError(CredentialsError):
    """No API token was found in any credential source."""

    def __init__(
        self,
        message: str = (
            "No packagecloud token found. Pass --token, set PACKAGECLOUD_TOKEN, "
            "or create ~/.packagecloud"
        ),
    ) -> None:
        super().__init__(message)


class NetworkError(PackagecloudError):
    """The request never produced an HTTP response.

    Attributes:
        cause: The underlying transport exception.
    """

    def __init__(
        self,
        message: str = "Cannot connect to packagecloud API",
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message)


class APIError(PackagecloudError):
    """Error status returned by the packagecloud API.

    Attributes:
        status_code: HTTP status code from the API.
        message: Error message as reported, e.g. "has already been taken".
            str() prefixes it with the status: "[422] has already been taken".
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


class AuthenticationError(APIError):
    """The API rejected the token (401)."""

    def __init__(self, message: str = "HTTP status: Unauthorized") -> None:
        super().__init__(401, message)


class NotFoundError(APIError):
    """The requested repository or package does not exist (404)."""

    def __init__(self, message: str = "HTTP status: Not Found") -> None:
        super().__init__(404, message)


class UnprocessableEntityError(APIError):
    """The API refused the request body (422).

    Attributes:
        field: Name of the field the message was reported for, if any.
    """

    def __init__(self, message: str = "invalid HTTP body", field: str | None = None) -> None:
        self.field = field
        super().__init__(422, message)


class DecodeError(PackagecloudError):
    """A successful response carried a body that could not be decoded."""


class InvalidDistroError(PackagecloudError):
    """The distro/version pair is not in the distributions catalog."""

    def __init__(self, distro: str) -> None:
        self.distro = distro
        super().__init__(f"invalid distro name: {distro}")


class PaginationError(PackagecloudError):
    """A list response had missing or malformed pagination headers."""
