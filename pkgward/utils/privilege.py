"""Privilege escalation helper for package installs and systemctl verbs."""

import logging
import os
from typing import List

from .constants import DEFAULT_PRIVILEGE_COMMAND, PRIVILEGE_COMMANDS

logger = logging.getLogger(__name__)


class PrivilegeHelper:
    """Helper for building the command prefix used to run privileged operations."""

    @staticmethod
    def is_root() -> bool:
        """Check if the current process already runs as root.

        Returns:
            True if the effective user id is 0, False otherwise
        """
        try:
            return os.geteuid() == 0
        except AttributeError:
            # Not a POSIX platform
            return False

    @staticmethod
    def is_valid_command(privilege_command) -> bool:
        """Check whether a configured privilege command is supported.

        Args:
            privilege_command: Value of the privilege_command setting

        Returns:
            True if the value is one of the known escalation tools
        """
        return isinstance(privilege_command, str) and privilege_command in PRIVILEGE_COMMANDS

    @staticmethod
    def build_prefix(privilege_command: str = DEFAULT_PRIVILEGE_COMMAND) -> List[str]:
        """Build the argv prefix that elevates a command.

        Args:
            privilege_command: Escalation tool name, or "" / "none" to disable

        Returns:
            List with the escalation tool, or an empty list when no elevation is needed
        """
        if not privilege_command or privilege_command == "none":
            return []

        if PrivilegeHelper.is_root():
            logger.debug("Running as root, skipping privilege escalation")
            return []

        return [privilege_command]

    @staticmethod
    def from_config(config_manager=None) -> List[str]:
        """Build the privilege prefix from the application settings.

        Args:
            config_manager: Optional ConfigManager instance to read settings from

        Returns:
            Privilege prefix list
        """
        if config_manager is None:
            return PrivilegeHelper.build_prefix()

        return PrivilegeHelper.build_prefix(
            config_manager.get_setting("privilege_command", DEFAULT_PRIVILEGE_COMMAND)
        )
