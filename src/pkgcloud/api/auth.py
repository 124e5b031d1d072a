"""Credential resolution for the packagecloud API."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from . import config
from .exceptions import CredentialsError, CredentialsMissingError
from .types import Credentials

logger = logging.getLogger(__name__)


def load_credentials_file(path: Path) -> Credentials | None:
    """Load credentials from a JSON file.

    Args:
        path: Path to the credentials file.

    Returns:
        Credentials if the file exists, None otherwise.

    Raises:
        CredentialsError: If the file exists but is not valid.
    """
    if not path.exists():
        return None
    try:
        return Credentials.model_validate_json(path.read_text())
    except (ValidationError, OSError) as e:
        raise CredentialsError(f"Invalid credentials file {path}") from e


def resolve_credentials(
    token: str | None = None,
    credentials_path: Path | None = None,
) -> Credentials:
    """Find the credentials to use for this invocation.

    Checks in order of priority:
    1. Explicitly provided token
    2. PACKAGECLOUD_TOKEN environment variable
    3. ~/.packagecloud credentials file (url and token used as-is)

    Args:
        token: Explicitly provided API token.
        credentials_path: Path to credentials file. Defaults to ~/.packagecloud.

    Returns:
        The resolved credentials.

    Raises:
        CredentialsMissingError: If no source provides a token.
        CredentialsError: If the credentials file is malformed.
    """
    if token:
        logger.debug("Using token passed explicitly")
        return Credentials(url=config.SERVICE_BASE_URL, token=token)

    env_token = os.environ.get(config.TOKEN_ENV)
    if env_token:
        logger.debug(f"Using token from {config.TOKEN_ENV}")
        return Credentials(url=config.SERVICE_BASE_URL, token=env_token)

    path = credentials_path or config.CREDENTIALS_FILE
    creds = load_credentials_file(path)
    if creds is not None:
        logger.debug(f"Using credentials from {path}")
        return creds

    raise CredentialsMissingError()
