"""Data models for command outcomes, service actions and name resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Action(Enum):
    """Enumeration of actions that can be applied to a service."""

    START = "start"
    STOP = "stop"
    STATUS = "status"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional['Action']:
        """Convert user input to an Action.

        Args:
            text: Raw action string, matched case-insensitively after trimming

        Returns:
            Action enum value, or None if the input is not a known action
        """
        if text is None:
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @classmethod
    def choices(cls) -> List[str]:
        """Get the accepted action strings in display order."""
        return [action.value for action in cls]


@dataclass
class CommandResult:
    """Outcome of a single external command.

    Attributes:
        command: Argument vector that was executed
        returncode: Process exit status
        output: Captured standard output
        diagnostic: Captured standard error
    """

    command: List[str]
    returncode: int
    output: str = ""
    diagnostic: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def text(self) -> str:
        """Standard output followed by standard error, as the command printed them."""
        parts = [part for part in (self.output, self.diagnostic) if part]
        if len(parts) == 2 and not parts[0].endswith("\n"):
            return parts[0] + "\n" + parts[1]
        return "".join(parts)

    @property
    def error_message(self) -> str:
        """Human-readable failure reason.

        Returns:
            Trimmed standard error, or the exit status when nothing was printed
        """
        if self.diagnostic and self.diagnostic.strip():
            return self.diagnostic.strip()
        return f"exit status {self.returncode}"


@dataclass
class ServiceResolution:
    """Result of mapping a package to its service unit.

    Attributes:
        package: Package the resolution was made for
        service_name: Unit name to manage
        candidates: Every unit file name found in the package listing
        fell_back: True when the package name was used because nothing matched
    """

    package: str
    service_name: str
    candidates: List[str] = field(default_factory=list)
    fell_back: bool = False

    def __post_init__(self):
        """Validate the resolution after initialization."""
        if not self.service_name:
            raise ValueError("Service name cannot be empty")

    @property
    def is_ambiguous(self) -> bool:
        """Check whether more than one unit file matched."""
        return len(self.candidates) > 1
