"""User-facing prompts. The Qt front end lives in ui.dialogs and is imported on demand."""

from .prompts import Prompter, PromptCancelled
from .console import ConsolePrompter

__all__ = ["Prompter", "PromptCancelled", "ConsolePrompter"]
