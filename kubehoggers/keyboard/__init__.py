"""Keyboard bindings."""

from kubehoggers.keyboard.app import APP_BINDINGS

__all__ = ["APP_BINDINGS"]
