"""Qt dialog front end, used with --gui."""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QInputDialog, QMessageBox

from ..utils.constants import APP_NAME
from .prompts import PromptCancelled, Prompter

logger = logging.getLogger(__name__)


class QtPrompter(Prompter):
    """Prompter that asks through QInputDialog and reports through QMessageBox."""

    def __init__(self):
        self._qt_app = None

    def _ensure_app(self):
        """Create the QApplication on first use."""
        if self._qt_app is None:
            self._qt_app = QApplication.instance() or QApplication(sys.argv[:1])
            self._qt_app.setApplicationName(APP_NAME)
            self._qt_app.setApplicationDisplayName(APP_NAME)
        return self._qt_app

    def ask_package(self) -> str:
        self._ensure_app()
        text, ok = QInputDialog.getText(None, APP_NAME, "Package name:")
        if not ok:
            logger.info("Package prompt cancelled")
            raise PromptCancelled("package")
        return text.strip()

    def ask_action(self) -> str:
        self._ensure_app()
        # Editable so that free text goes through the same validation as the terminal
        item, ok = QInputDialog.getItem(
            None, APP_NAME, "Action:", self.ACTION_CHOICES, 0, True
        )
        if not ok:
            logger.info("Action prompt cancelled")
            raise PromptCancelled("action")
        return item

    def show_message(self, message: str):
        self._ensure_app()
        QMessageBox.information(None, APP_NAME, message)

    def show_error(self, message: str):
        self._ensure_app()
        QMessageBox.critical(None, f"{APP_NAME} Error", message)

    def show_status(self, service_name: str, text: str):
        self._ensure_app()
        QMessageBox.information(None, f"Status of {service_name}", text)
