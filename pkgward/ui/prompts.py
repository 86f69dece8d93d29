"""Interface shared by the terminal and dialog front ends."""

from ..models.result import Action


class PromptCancelled(Exception):
    """Raised when the user dismisses a prompt instead of answering it."""


class Prompter:
    """Collects input from the user and shows the outcome of each step.

    Subclasses implement the prompts and the three kinds of output.
    """

    ACTION_CHOICES = Action.choices()

    def ask_package(self) -> str:
        raise NotImplementedError

    def ask_action(self) -> str:
        raise NotImplementedError

    def show_message(self, message: str):
        raise NotImplementedError

    def show_error(self, message: str):
        raise NotImplementedError

    def show_status(self, service_name: str, text: str):
        raise NotImplementedError
