"""Service manager for interacting with systemd via systemctl."""

import logging
from typing import List, Optional, Tuple

from ..models.result import Action, CommandResult
from .runner import CommandRunner

logger = logging.getLogger(__name__)


class ServiceManager:
    """Manages systemd services via systemctl commands."""

    def __init__(self, runner: Optional[CommandRunner] = None,
                 privilege_prefix: Optional[List[str]] = None):
        """Initialize the service manager.

        Args:
            runner: CommandRunner used to execute systemctl
            privilege_prefix: Argv prefix used to elevate start/stop
        """
        self.runner = runner or CommandRunner()
        self.privilege_prefix = list(privilege_prefix or [])

    def start_service(self, service_name: str) -> Tuple[bool, Optional[str]]:
        """Start a systemd service.

        Args:
            service_name: Name of the systemd service

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        return self._execute_systemctl_action(Action.START, service_name)

    def stop_service(self, service_name: str) -> Tuple[bool, Optional[str]]:
        """Stop a systemd service.

        Args:
            service_name: Name of the systemd service

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        return self._execute_systemctl_action(Action.STOP, service_name)

    def get_service_status(self, service_name: str) -> CommandResult:
        """Query the status of a systemd service.

        systemctl exits non-zero for inactive or unknown units; the text is
        still meaningful and is returned unchanged.

        Args:
            service_name: Name of the systemd service

        Returns:
            CommandResult of `systemctl status`
        """
        result = self.runner.run(["systemctl", "status", service_name, "--no-pager"])
        if not result.text and not result.succeeded:
            logger.error(f"Failed to get status for {service_name}: {result.error_message}")
        return result

    def _execute_systemctl_action(self, action: Action, service_name: str) -> Tuple[bool, Optional[str]]:
        """Execute a privileged systemctl action (start, stop).

        Args:
            action: Action to apply
            service_name: Name of the systemd service

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        cmd = [*self.privilege_prefix, "systemctl", action.value, service_name]
        result = self.runner.run(cmd)

        if result.succeeded:
            logger.info(f"Successfully ran {action.value} on {service_name}")
            return True, None

        error_msg = result.error_message
        logger.error(f"Failed to {action.value} {service_name}: {error_msg}")
        return False, error_msg
