"""Utility functions and constants."""

from .constants import *
from .privilege import PrivilegeHelper

__all__ = ["APP_NAME", "CONFIG_DIR", "CONFIG_FILE", "LOG_FILE", "SERVICE_FILE_SUFFIX", "PrivilegeHelper"]
