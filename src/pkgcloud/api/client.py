"""HTTP client for the packagecloud API.

See https://packagecloud.io/docs/api
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

import requests

from .auth import resolve_credentials
from .config import API_PATH, USER_AGENT
from .decoding import decode_response
from .exceptions import InvalidDistroError, NetworkError
from .pagination import next_page_url, parse_pagination_headers
from .types import (
    Credentials,
    DestroyAction,
    Distributions,
    Package,
    PackageAction,
    PackageType,
    PaginatedPackages,
    PromoteAction,
)

logger = logging.getLogger(__name__)

PACKAGE_FILE_FIELD = "package[package_file]"
DISTRO_VERSION_FIELD = "package[distro_version_id]"


def package_type_for(path: str | os.PathLike[str]) -> PackageType:
    """Guess the package type of a file from its extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".rpm":
        return "rpm"
    if suffix == ".dsc":
        return "dsc"
    return "deb"


class PackagecloudClient:
    """HTTP client for the packagecloud API."""

    def __init__(self, base_url: str, token: str) -> None:
        """Initialize the packagecloud API client.

        Args:
            base_url: Base URL of the service, e.g. https://packagecloud.io.
            token: API token, sent as the basic auth username.
        """
        self._credentials = Credentials(url=base_url.rstrip("/"), token=token)
        self._session = requests.Session()

    @classmethod
    def from_credentials(
        cls, token: str | None = None, credentials_path: Path | None = None
    ) -> PackagecloudClient:
        """Create a client from the first available credential source.

        Raises:
            CredentialsMissingError: If no token could be found.
        """
        creds = resolve_credentials(token, credentials_path)
        return cls(creds.url, creds.token)

    @property
    def base_url(self) -> str:
        return self._credentials.url

    @property
    def token(self) -> str:
        return self._credentials.token

    @property
    def api_url(self) -> str:
        return f"{self.base_url}{API_PATH}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _url(self, path: str) -> str:
        """Resolve a server-provided path against the base URL.

        Absolute URLs are returned unchanged.
        """
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        url: str,
        data: dict | None = None,
        files: dict | None = None,
    ) -> requests.Response:
        """Make a single authenticated request.

        Args:
            method: HTTP method.
            url: Full request URL.
            data: Form fields, URL-encoded unless files are given.
            files: Files for multipart upload.

        Returns:
            Response object, whatever its status.

        Raises:
            NetworkError: On connection issues.
        """
        logger.debug(f"{method} {url}")
        try:
            return self._session.request(
                method,
                url,
                auth=(self.token, ""),
                headers={"User-Agent": USER_AGENT},
                data=data,
                files=files,
            )
        except requests.exceptions.ConnectionError as e:
            raise NetworkError("Cannot connect to packagecloud API", e) from e
        except requests.exceptions.Timeout as e:
            raise NetworkError("Request timed out", e) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError("Network request failed", e) from e

    # ==================== DISTRIBUTIONS ====================

    def distributions(self) -> Distributions:
        """Retrieve the catalog of supported distributions."""
        resp = self._request("GET", f"{self.api_url}/distributions.json")
        return decode_response(resp, Distributions)

    def supported_distros(self, package_type: PackageType = "deb") -> dict[str, int]:
        """Map "distro/version" names like "ubuntu/xenial" to distro version IDs.

        Args:
            package_type: Package type whose distributions are returned.
        """
        return self.distributions().version_ids(package_type)

    # ==================== PACKAGES ====================

    def exists(self, repo: str, distro: str, filename: str) -> bool:
        """Check whether <repo>/<distro>/<filename> exists.

        Any status other than 200 counts as absent.

        Raises:
            NetworkError: If the request could not be made.
        """
        # repo/distro/packages/filename; the web UI uses repo/packages/distro/filename
        resp = self._request("HEAD", f"{self.base_url}/{repo}/{distro}/packages/{filename}")
        return resp.status_code == 200

    def create_package(
        self, repo: str, distro: str | None, path: str | os.PathLike[str]
    ) -> None:
        """Upload a package file to a repository.

        Args:
            repo: Repository, e.g. "user/repo".
            distro: Target such as "ubuntu/xenial", or None for packages
                that need no distribution (e.g. gems).
            path: Path to the package file.

        Raises:
            InvalidDistroError: If the distro is not in the catalog. Nothing
                is uploaded in that case.
        """
        data: dict[str, str] = {}
        if distro:
            ids = self.supported_distros(package_type_for(path))
            if distro not in ids:
                raise InvalidDistroError(distro)
            data[DISTRO_VERSION_FIELD] = str(ids[distro])

        filename = os.path.basename(path)
        with open(path, "rb") as f:
            resp = self._request(
                "POST",
                f"{self.api_url}/repos/{repo}/packages.json",
                data=data,
                files={PACKAGE_FILE_FIELD: (filename, f)},
            )
        decode_response(resp)
        logger.info(f"Uploaded {filename} to {repo}")

    def destroy(self, repo_distro: str, filename: str) -> None:
        """Remove a package by path.

        Args:
            repo_distro: Full distro path of the repository, e.g.
                "user/repo/ubuntu/xenial".
            filename: Package filename.
        """
        resp = self._request("DELETE", f"{self.api_url}/repos/{repo_distro}/{filename}")
        decode_response(resp)
        logger.info(f"Destroyed {filename} on {repo_distro}")

    def destroy_package(self, package: Package) -> None:
        """Remove a package using the destroy URL it was listed with."""
        resp = self._request("DELETE", self._url(package.destroy_url))
        decode_response(resp)
        logger.info(f"Destroyed {package.package_html_url or package.filename}")

    def promote(self, package: Package, destination: str) -> None:
        """Promote a package to another repository.

        Args:
            package: Package as returned by a listing.
            destination: Destination repository, e.g. "user/release".
        """
        resp = self._request(
            "POST", self._url(package.promote_url), data={"destination": destination}
        )
        decode_response(resp)
        logger.info(f"Promoted {package.filename} to {destination}")

    def apply_actions(self, actions: Sequence[PackageAction]) -> None:
        """Run pending destroy and promote actions in order.

        Stops at the first failing action; earlier actions stay applied.
        """
        for action in actions:
            if isinstance(action, DestroyAction):
                self.destroy_package(action.package)
            elif isinstance(action, PromoteAction):
                self.promote(action.package, action.destination)
            else:
                raise TypeError(f"Unknown package action: {action!r}")

    # ==================== LISTING ====================

    def get_packages_page(self, url: str) -> PaginatedPackages:
        """Fetch one page of packages from a list endpoint.

        Raises:
            PaginationError: If the pagination headers are missing or malformed.
        """
        resp = self._request("GET", url)
        packages = decode_response(resp, list[Package])
        return PaginatedPackages(
            packages=packages,
            pagination=parse_pagination_headers(resp.headers),
            next_url=next_page_url(resp),
        )

    def list_packages(self, repo: str) -> PaginatedPackages:
        """Fetch the first page of all packages in a repository.

        Use next_page() to fetch the following pages.
        """
        return self.get_packages_page(f"{self.api_url}/repos/{repo}/packages.json")

    def next_page(self, page: PaginatedPackages) -> PaginatedPackages | None:
        """Fetch the page after `page`, or None if `page` is the last one."""
        if page.next_url is None:
            return None
        return self.get_packages_page(page.next_url)

    def iter_pages(self, repo: str) -> Iterator[PaginatedPackages]:
        """Lazily walk all pages of a repository's package listing.

        Yields:
            Pages in server order, until one has no next link.
        """
        page: PaginatedPackages | None = self.list_packages(repo)
        while page is not None:
            yield page
            page = self.next_page(page)

    def all_packages(self, repo: str) -> list[Package]:
        """Fetch every package of a repository across all pages."""
        return [p for page in self.iter_pages(repo) for p in page.packages]
