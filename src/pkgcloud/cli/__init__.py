"""pkgcloud command-line interface."""
