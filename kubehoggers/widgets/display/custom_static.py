"""CustomStatic widget - standardized wrapper around Textual's Static."""

from __future__ import annotations

from typing import Any

from textual.widgets import Static


class CustomStatic(Static):
    """Static text with the application's default styling.

    Markup is disabled, so pod and node names render verbatim.

    CSS Classes: widget-custom-static
    """

    DEFAULT_CSS = """
    CustomStatic {
        width: 1fr;
        height: auto;
    }
    CustomStatic.title {
        color: $success;
        text-style: bold;
    }
    CustomStatic.status {
        color: $text-muted;
    }
    CustomStatic.status.-error {
        color: $error;
    }
    """

    def __init__(self, content: str = "", *, id: str | None = None, classes: str = "") -> None:
        self._text = content
        super().__init__(
            content,
            id=id,
            classes=f"widget-custom-static {classes}".strip(),
            markup=False,
        )

    @property
    def text(self) -> str:
        """The plain text currently shown."""
        return self._text

    def update(self, content: str = "", **kwargs: Any) -> None:
        self._text = str(content)
        super().update(content, **kwargs)
