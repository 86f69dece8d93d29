"""Application constants and configuration."""

from pathlib import Path

# Application metadata
APP_NAME = "pkgward"

# Paths
CONFIG_DIR = Path.home() / ".config" / "pkgward"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
LOG_FILE = CONFIG_DIR / "pkgward.log"

# Default settings
DEFAULT_PACKAGE_MANAGER = "auto"
DEFAULT_PRIVILEGE_COMMAND = "sudo"
SERVICE_FILE_SUFFIX = ".service"

# Privilege escalation tools accepted in the config ("" and "none" disable it)
PRIVILEGE_COMMANDS = ("sudo", "pkexec", "doas", "", "none")

# Exit codes
EXIT_OK = 0
EXIT_INSTALL_FAILED = 1
EXIT_CONFIG_WRITE_FAILED = 2
EXIT_CANCELLED = 130

# Returned by the runner when a command could not be launched at all
COMMAND_NOT_RUN = 127
