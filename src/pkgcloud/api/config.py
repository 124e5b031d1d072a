"""packagecloud API configuration constants."""

import os
from pathlib import Path

from pkgcloud import __version__

SERVICE_BASE_URL = os.environ.get("PACKAGECLOUD_URL", "https://packagecloud.io")
API_PATH = "/api/v1"
TOKEN_ENV = "PACKAGECLOUD_TOKEN"
CREDENTIALS_FILE = Path.home() / ".packagecloud"
USER_AGENT = f"pkgcloud-cli/{__version__}"
