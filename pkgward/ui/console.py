"""Terminal prompts and output."""

import sys
from typing import Callable, Optional, TextIO

from .prompts import PromptCancelled, Prompter


class ConsolePrompter(Prompter):
    """Prompter that reads from stdin and writes to stdout/stderr."""

    def __init__(self, input_func: Optional[Callable[[str], str]] = None,
                 stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._input = input_func or input
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            # Leave the terminal on a fresh line
            self.stdout.write("\n")
            raise PromptCancelled(prompt.strip()) from None

    def ask_package(self) -> str:
        return self._ask("Enter the package name: ").strip()

    def ask_action(self) -> str:
        return self._ask(f"Choose an action ({'/'.join(self.ACTION_CHOICES)}): ")

    def show_message(self, message: str):
        print(message, file=self.stdout)

    def show_error(self, message: str):
        print(message, file=self.stderr)

    def show_status(self, service_name: str, text: str):
        # Verbatim, only making sure the output ends on a newline
        self.stdout.write(text if text.endswith("\n") else text + "\n")
        self.stdout.flush()
