"""Maps a package to the systemd unit it ships."""

import logging
from pathlib import PurePosixPath
from typing import Iterable, List

from ..models.result import ServiceResolution
from ..utils.constants import SERVICE_FILE_SUFFIX
from .package_manager import PackageManager

logger = logging.getLogger(__name__)


def find_service_candidates(paths: Iterable[str], suffix: str = SERVICE_FILE_SUFFIX) -> List[str]:
    """Collect unit file names from a package file listing.

    Args:
        paths: Paths owned by the package
        suffix: Unit file suffix to match

    Returns:
        Base file names ending in the suffix, first occurrence order, without duplicates
    """
    candidates: List[str] = []
    for path in paths:
        path = path.strip()
        if not path.endswith(suffix):
            continue
        name = PurePosixPath(path).name
        if name and name not in candidates:
            candidates.append(name)
    return candidates


class ServiceResolver:
    """Resolves service names from package file manifests.

    The mapping is a heuristic: packages whose unit is named after something
    other than a file they own resolve to the package name itself.
    """

    def __init__(self, package_manager: PackageManager, suffix: str = SERVICE_FILE_SUFFIX):
        self.package_manager = package_manager
        self.suffix = suffix

    def resolve(self, package: str) -> ServiceResolution:
        """Resolve the service for a package.

        Args:
            package: Package name

        Returns:
            ServiceResolution with the chosen name and every candidate found
        """
        listed, paths = self.package_manager.list_files(package)
        candidates = find_service_candidates(paths, self.suffix) if listed else []

        if not candidates:
            logger.info(f"No {self.suffix} file found for {package}, using package name")
            return ServiceResolution(package=package, service_name=package, fell_back=True)

        resolution = ServiceResolution(package=package, service_name=candidates[0], candidates=candidates)
        if resolution.is_ambiguous:
            logger.warning(
                f"Package {package} ships several units ({', '.join(candidates)}), using {candidates[0]}"
            )
        else:
            logger.info(f"Resolved service for {package}: {candidates[0]}")
        return resolution

    def resolve_service_name(self, package: str) -> str:
        """Resolve just the service name for a package."""
        return self.resolve(package).service_name
