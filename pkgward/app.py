"""Main workflow coordinator for pkgward."""

import logging
from typing import Callable, Optional

from .core.config_manager import ConfigManager
from .core.package_manager import PackageManager, get_backend
from .core.runner import CommandRunner
from .core.service_manager import ServiceManager
from .core.service_resolver import ServiceResolver
from .models.result import Action
from .ui.prompts import Prompter
from .utils.constants import EXIT_INSTALL_FAILED, EXIT_OK, SERVICE_FILE_SUFFIX
from .utils.privilege import PrivilegeHelper

logger = logging.getLogger(__name__)


class PkgWardApp:
    """Main application coordinator.

    Runs the check, install, resolve and dispatch sequence for one package.
    Only a failed install changes the exit code; every other failure is
    reported and the run still ends with EXIT_OK.
    """

    def __init__(self, package_manager: PackageManager, service_manager: ServiceManager,
                 resolver: ServiceResolver, prompter: Prompter):
        self.package_manager = package_manager
        self.service_manager = service_manager
        self.resolver = resolver
        self.prompter = prompter

    @classmethod
    def from_config(cls, config_manager: ConfigManager, prompter: Prompter,
                    runner: Optional[CommandRunner] = None) -> 'PkgWardApp':
        """Build the application from loaded settings.

        Args:
            config_manager: ConfigManager with settings already loaded
            prompter: Front end used for output
            runner: CommandRunner shared by all managers

        Returns:
            PkgWardApp instance
        """
        runner = runner or CommandRunner()
        privilege_prefix = PrivilegeHelper.from_config(config_manager)
        backend = get_backend(config_manager.get_setting("package_manager", "auto"))
        logger.info(f"Using package manager '{backend.name}', privilege prefix {privilege_prefix or 'none'}")

        package_manager = PackageManager(runner, backend, privilege_prefix)
        service_manager = ServiceManager(runner, privilege_prefix)
        resolver = ServiceResolver(
            package_manager,
            config_manager.get_setting("service_suffix", SERVICE_FILE_SUFFIX),
        )
        return cls(package_manager, service_manager, resolver, prompter)

    def run(self, package: str, select_action: Callable[[], str]) -> int:
        """Run the workflow for one package.

        Args:
            package: Package name
            select_action: Called once to choose an action, only when the package
                was already installed

        Returns:
            Process exit code
        """
        package = package.strip()
        if not package:
            self.prompter.show_error("Package name cannot be empty.")
            return EXIT_OK

        if package.startswith("-"):
            # Would be parsed as an option by dpkg, apt-get and rpm
            self.prompter.show_error(f"Invalid package name '{package}': names cannot start with '-'.")
            return EXIT_OK

        if not self.package_manager.is_installed(package):
            return self._install_and_start(package)

        self.prompter.show_message(f"{package} is already installed.")
        service_name = self._resolve(package)

        raw_action = select_action()
        action = Action.parse(raw_action)
        if action is None:
            logger.warning(f"Rejected action {raw_action!r}")
            self.prompter.show_error(
                f"Invalid action '{raw_action.strip()}'. Choose one of: {', '.join(Action.choices())}."
            )
            return EXIT_OK

        self.dispatch(service_name, action)
        return EXIT_OK

    def dispatch(self, service_name: str, action: Action):
        """Apply an action to a service and report the outcome.

        Args:
            service_name: Name of the systemd service
            action: Action to apply
        """
        if action is Action.START:
            self._start(service_name)
        elif action is Action.STOP:
            self._stop(service_name)
        else:
            self._show_status(service_name)

    def _install_and_start(self, package: str) -> int:
        self.prompter.show_message(f"{package} is not installed. Installing...")
        result = self.package_manager.install(package)
        if not result.succeeded:
            self.prompter.show_error(f"Failed to install {package}: {result.error_message}")
            return EXIT_INSTALL_FAILED

        self.prompter.show_message(f"{package} installed successfully.")
        service_name = self._resolve(package)
        self._start(service_name)
        self._show_status(service_name)
        return EXIT_OK

    def _resolve(self, package: str) -> str:
        resolution = self.resolver.resolve(package)
        if resolution.is_ambiguous:
            self.prompter.show_message(
                f"{package} provides several services ({', '.join(resolution.candidates)}); "
                f"using {resolution.service_name}."
            )
        return resolution.service_name

    def _start(self, service_name: str):
        success, error = self.service_manager.start_service(service_name)
        if success:
            self.prompter.show_message(f"Started {service_name}.")
        else:
            self.prompter.show_error(f"Failed to start {service_name}: {error}")

    def _stop(self, service_name: str):
        success, error = self.service_manager.stop_service(service_name)
        if success:
            self.prompter.show_message(f"Stopped {service_name}.")
        else:
            self.prompter.show_error(f"Failed to stop {service_name}: {error}")

    def _show_status(self, service_name: str):
        result = self.service_manager.get_service_status(service_name)
        if result.text or result.succeeded:
            self.prompter.show_status(service_name, result.text)
        else:
            self.prompter.show_error(f"Failed to get status of {service_name}: {result.error_message}")
