"""pkgward - install an OS package and manage the systemd service it ships."""

__version__ = "1.0.0"
