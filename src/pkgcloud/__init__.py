"""pkgcloud - command-line client for the packagecloud.io API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pkgcloud")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
