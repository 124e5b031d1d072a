"""CLI commands for pkgcloud."""
