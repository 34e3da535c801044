"""Base screen class.

This module provides BaseScreen, an abstract base class that encapsulates the
patterns shared by the report and top screens:

1. TITLE: subclasses provide ``screen_title``; it is applied to the app on mount.
2. LOADING: subclasses implement ``load_data``; it is started on mount.
3. FATAL ERRORS: ``abort(error)`` ends the app with exit code 1. Textual
   restores the terminal before the message is printed.
4. EXIT: ``prepare_for_exit`` lets a screen stop background work before the
   app quits.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING

from textual.screen import Screen

from kubehoggers.widgets import CustomStatic

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class BaseScreen(Screen[None]):
    """Abstract base class for screens with common patterns.

    Subclasses must implement:
    - screen_title: The title to display in the window
    - load_data: Method that starts loading screen data
    """

    STATUS_ID = "status-line"

    @property
    @abstractmethod
    def screen_title(self) -> str:
        """Title shown in the app header."""
        ...

    @abstractmethod
    def load_data(self) -> None:
        """Start loading the screen's data."""
        ...

    def compose_status(self, message: str = "") -> ComposeResult:
        yield CustomStatic(message, id=self.STATUS_ID, classes="status")

    def on_mount(self) -> None:
        self.app.sub_title = self.screen_title
        self.load_data()

    def set_status(self, message: str, *, is_error: bool = False) -> None:
        status = self.query_one(f"#{self.STATUS_ID}", CustomStatic)
        status.update(message)
        status.set_class(is_error, "-error")

    def prepare_for_exit(self) -> None:
        """Stop background work before the app exits."""

    def abort(self, error: BaseException | str) -> None:
        """End the app with a diagnostic and a non-zero exit code."""
        message = str(error)
        logger.error("Aborting: %s", message)
        self.prepare_for_exit()
        self.app.exit(return_code=1, message=message)
