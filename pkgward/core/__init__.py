"""Core functionality for package and service management."""

from .runner import CommandRunner
from .package_manager import PackageManager, PackageBackend, get_backend
from .service_manager import ServiceManager
from .service_resolver import ServiceResolver
from .config_manager import ConfigManager

__all__ = [
    "CommandRunner",
    "PackageManager",
    "PackageBackend",
    "get_backend",
    "ServiceManager",
    "ServiceResolver",
    "ConfigManager",
]
