"""Shared fixtures and configuration for tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import patch

import pytest
import requests

from pkgcloud.api.client import PackagecloudClient
from pkgcloud.api.types import Package

BASE_URL = "https://packagecloud.io"
API_URL = f"{BASE_URL}/api/v1"
TOKEN = "test-token-123"

# ==================== MOCK DATA ====================


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    url: str = API_URL,
) -> requests.Response:
    """Create a real requests.Response with the given status, body and headers.

    Non-bytes bodies are JSON-encoded.
    """
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body).encode()
    if headers:
        resp.headers.update(headers)
    return resp


def pagination_headers(
    total: int = 2, per_page: int = 30, max_per_page: int = 250, next_url: str | None = None
) -> dict[str, str]:
    headers = {
        "Total": str(total),
        "Per-Page": str(per_page),
        "Max-Per-Page": str(max_per_page),
    }
    if next_url:
        headers["Link"] = f'<{next_url}>; rel="next", <{next_url}&last=1>; rel="last"'
    return headers


def make_package_dict(
    filename: str = "foo_1.0_amd64.deb",
    name: str = "foo",
    repo: str = "user/repo",
    distro: str = "ubuntu/xenial",
    created_at: str = "2018-05-01T12:00:00.000Z",
) -> dict[str, Any]:
    """Create a package fragment as returned by the list endpoint."""
    return {
        "name": name,
        "distro_version": distro,
        "created_at": created_at,
        "version": "1.0",
        "release": None,
        "epoch": 0,
        "scope": None,
        "private": False,
        "type": "deb",
        "filename": filename,
        "uploader_name": "user",
        "indexed": True,
        "repository_html_url": f"/{repo}",
        "package_url": f"/api/v1/repos/{repo}/package/deb/{distro}/{name}/amd64/1.0.json",
        "downloads_detail_url": f"/api/v1/repos/{repo}/package/deb/{distro}/{name}/amd64/1.0/stats/downloads/detail.json",
        "downloads_series_url": f"/api/v1/repos/{repo}/package/deb/{distro}/{name}/amd64/1.0/stats/downloads/series/daily.json",
        "downloads_count_url": f"/api/v1/repos/{repo}/package/deb/{distro}/{name}/amd64/1.0/stats/downloads/count.json",
        "package_html_url": f"/{repo}/packages/{distro}/{filename}",
        "promote_url": f"/api/v1/repos/{repo}/{distro}/{filename}/promote.json",
        "destroy_url": f"/api/v1/repos/{repo}/{distro}/{filename}",
        "checksums": {"md5sum": "abc"},
    }


def make_package(**kwargs: Any) -> Package:
    return Package.model_validate(make_package_dict(**kwargs))


def make_distributions_dict() -> dict[str, Any]:
    """Create a small distributions catalog."""
    return {
        "deb": [
            {
                "display_name": "Ubuntu",
                "index_name": "ubuntu",
                "versions": [
                    {"id": 165, "display_name": "16.04 Xenial Xerus", "index_name": "xenial"},
                    {"id": 190, "display_name": "18.04 Bionic Beaver", "index_name": "bionic"},
                ],
            },
            {
                "display_name": "Debian",
                "index_name": "debian",
                "versions": [
                    {"id": 149, "display_name": "9.0 Stretch", "index_name": "stretch"},
                ],
            },
        ],
        "dsc": [
            {
                "display_name": "Ubuntu",
                "index_name": "ubuntu",
                "versions": [
                    {"id": 1165, "display_name": "16.04 Xenial Xerus", "index_name": "xenial"},
                ],
            },
        ],
        "rpm": [
            {
                "display_name": "Enterprise Linux",
                "index_name": "el",
                "versions": [
                    {"id": 140, "display_name": "7.0", "index_name": "7"},
                ],
            },
        ],
    }


# ==================== FIXTURES ====================


@pytest.fixture
def client() -> PackagecloudClient:
    """Client pointed at the default service URL."""
    return PackagecloudClient(BASE_URL, TOKEN)


@pytest.fixture
def mock_request(client):
    """Patch the client's session so no request leaves the process."""
    with patch.object(client._session, "request") as mock:
        yield mock


@pytest.fixture
def credentials_file(tmp_path):
    """Credentials file with a custom url and token."""
    path = tmp_path / ".packagecloud"
    path.write_text(json.dumps({"url": "https://pc.example.com", "token": "file-token"}))
    return path
