"""packagecloud API client."""

from .auth import load_credentials_file, resolve_credentials
from .client import PackagecloudClient, package_type_for
from .config import CREDENTIALS_FILE, SERVICE_BASE_URL, TOKEN_ENV
from .decoding import decode_response
from .exceptions import (
    APIError,
    AuthenticationError,
    CredentialsError,
    CredentialsMissingError,
    DecodeError,
    InvalidDistroError,
    NetworkError,
    NotFoundError,
    PackagecloudError,
    PaginationError,
    UnprocessableEntityError,
)
from .types import (
    Credentials,
    DestroyAction,
    Distribution,
    Distributions,
    DistributionVersion,
    LinearizedDistribution,
    Package,
    PackageAction,
    PaginatedPackages,
    Pagination,
    PromoteAction,
)

__all__ = [
    # Auth
    "resolve_credentials",
    "load_credentials_file",
    # Client
    "PackagecloudClient",
    "package_type_for",
    "decode_response",
    # Config
    "SERVICE_BASE_URL",
    "CREDENTIALS_FILE",
    "TOKEN_ENV",
    # Errors
    "PackagecloudError",
    "CredentialsError",
    "CredentialsMissingError",
    "NetworkError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "UnprocessableEntityError",
    "DecodeError",
    "InvalidDistroError",
    "PaginationError",
    # Types
    "Credentials",
    "Package",
    "Pagination",
    "PaginatedPackages",
    "Distributions",
    "Distribution",
    "DistributionVersion",
    "LinearizedDistribution",
    "PackageAction",
    "DestroyAction",
    "PromoteAction",
]
