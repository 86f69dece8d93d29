"""Data models for package and service management."""

from .result import Action, CommandResult, ServiceResolution

__all__ = ["Action", "CommandResult", "ServiceResolution"]
