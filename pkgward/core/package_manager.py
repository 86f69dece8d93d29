"""Package manager for querying and installing OS packages."""

import logging
import shutil
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..models.result import CommandResult
from ..utils.constants import DEFAULT_PACKAGE_MANAGER
from .runner import CommandRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageBackend:
    """Command templates for one host package manager.

    Attributes:
        name: Backend name used in the config file
        query: Argv that exits zero when the package is installed
        install: Non-interactive install argv
        list_files: Argv that prints one owned path per line
        binary: Executable whose presence on PATH selects this backend
    """

    name: str
    query: Tuple[str, ...]
    install: Tuple[str, ...]
    list_files: Tuple[str, ...]
    binary: str


# Order matters for auto-detection
BACKENDS: Dict[str, PackageBackend] = {
    "apt": PackageBackend(
        name="apt",
        query=("dpkg", "-s"),
        install=("apt-get", "install", "-y"),
        list_files=("dpkg", "-L"),
        binary="apt-get",
    ),
    "dnf": PackageBackend(
        name="dnf",
        query=("rpm", "-q"),
        install=("dnf", "install", "-y"),
        list_files=("rpm", "-ql"),
        binary="dnf",
    ),
    "yum": PackageBackend(
        name="yum",
        query=("rpm", "-q"),
        install=("yum", "install", "-y"),
        list_files=("rpm", "-ql"),
        binary="yum",
    ),
    "zypper": PackageBackend(
        name="zypper",
        query=("rpm", "-q"),
        install=("zypper", "--non-interactive", "install"),
        list_files=("rpm", "-ql"),
        binary="zypper",
    ),
}


def detect_backend() -> PackageBackend:
    """Pick the first backend whose package tool is on PATH.

    Returns:
        Detected PackageBackend, or the apt backend if nothing was found
    """
    for backend in BACKENDS.values():
        if shutil.which(backend.binary):
            logger.debug(f"Detected package manager: {backend.name}")
            return backend

    logger.warning("No supported package manager found on PATH, assuming apt")
    return BACKENDS["apt"]


def get_backend(name: str = DEFAULT_PACKAGE_MANAGER) -> PackageBackend:
    """Look up a backend by name.

    Args:
        name: Backend name, or 'auto' to detect it

    Returns:
        PackageBackend instance

    Raises:
        ValueError: If the name is not a known backend
    """
    if name == "auto":
        return detect_backend()

    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown package manager: {name}. Must be 'auto' or one of {', '.join(BACKENDS)}"
        ) from None


class PackageManager:
    """Manages OS packages via the host package manager commands."""

    def __init__(self, runner: Optional[CommandRunner] = None,
                 backend: Optional[PackageBackend] = None,
                 privilege_prefix: Optional[List[str]] = None):
        """Initialize the package manager.

        Args:
            runner: CommandRunner used to execute commands
            backend: Package manager backend, detected when omitted
            privilege_prefix: Argv prefix used to elevate the install command
        """
        self.runner = runner or CommandRunner()
        self.backend = backend or detect_backend()
        self.privilege_prefix = list(privilege_prefix or [])

    def is_installed(self, package: str) -> bool:
        """Check if a package is installed.

        A query that fails to run counts as not installed.

        Args:
            package: Package name

        Returns:
            True if installed, False otherwise
        """
        result = self.runner.run([*self.backend.query, package])
        installed = result.succeeded
        logger.info(f"Package {package} is {'installed' if installed else 'not installed'}")
        return installed

    def install(self, package: str) -> CommandResult:
        """Install a package without interactive confirmation.

        Args:
            package: Package name

        Returns:
            CommandResult of the install command
        """
        cmd = [*self.privilege_prefix, *self.backend.install, package]
        result = self.runner.run(cmd)

        if result.succeeded:
            logger.info(f"Successfully installed {package}")
        else:
            logger.error(f"Failed to install {package}: {result.error_message}")

        return result

    def list_files(self, package: str) -> Tuple[bool, List[str]]:
        """List the paths owned by a package.

        Args:
            package: Package name

        Returns:
            Tuple of (success: bool, paths: list of owned paths)
        """
        result = self.runner.run([*self.backend.list_files, package])
        if not result.succeeded:
            logger.debug(f"Could not list files of {package}: {result.error_message}")
            return False, []

        paths = [line.strip() for line in result.output.splitlines() if line.strip()]
        return True, paths
