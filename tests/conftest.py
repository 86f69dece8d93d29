"""Shared fixtures: a scripted command runner and a recording prompter."""

from typing import List, Tuple

import pytest

from pkgward.app import PkgWardApp
from pkgward.core.package_manager import BACKENDS, PackageManager
from pkgward.core.service_manager import ServiceManager
from pkgward.core.service_resolver import ServiceResolver
from pkgward.models.result import CommandResult
from pkgward.ui.prompts import Prompter


class FakeRunner:
    """Records every command and answers from scripted responses.

    A response matches when all of its tokens appear in the command; the
    first registered match wins. Unmatched commands succeed with no output.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self._responses: List[Tuple[Tuple[str, ...], int, str, str]] = []

    def respond(self, *tokens, returncode=0, output="", diagnostic=""):
        self._responses.append((tokens, returncode, output, diagnostic))

    def run(self, command):
        command = list(command)
        self.calls.append(command)
        for tokens, returncode, output, diagnostic in self._responses:
            if all(token in command for token in tokens):
                return CommandResult(command, returncode, output, diagnostic)
        return CommandResult(command, 0)

    def called(self, *tokens) -> bool:
        return any(all(token in call for token in tokens) for call in self.calls)


class RecordingPrompter(Prompter):
    """Prompter that answers from a list and keeps everything it was shown."""

    def __init__(self, package="", action=""):
        self.package = package
        self.action = action
        self.action_asked = False
        self.messages: List[str] = []
        self.errors: List[str] = []
        self.statuses: List[Tuple[str, str]] = []

    def ask_package(self):
        return self.package

    def ask_action(self):
        self.action_asked = True
        return self.action

    def show_message(self, message):
        self.messages.append(message)

    def show_error(self, message):
        self.errors.append(message)

    def show_status(self, service_name, text):
        self.statuses.append((service_name, text))


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def prompter():
    return RecordingPrompter()


@pytest.fixture
def package_manager(runner):
    return PackageManager(runner, BACKENDS["apt"], ["sudo"])


@pytest.fixture
def service_manager(runner):
    return ServiceManager(runner, ["sudo"])


@pytest.fixture
def app(runner, prompter, package_manager, service_manager):
    return PkgWardApp(package_manager, service_manager, ServiceResolver(package_manager), prompter)
