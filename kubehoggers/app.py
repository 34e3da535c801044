"""Main application class for the Kube Hoggers TUI."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual.app import App
from textual.binding import Binding

from kubehoggers.constants import APP_TITLE
from kubehoggers.constants.enums import ViewMode
from kubehoggers.controllers import ClusterController, MetricsController
from kubehoggers.keyboard.app import APP_BINDINGS
from kubehoggers.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class HoggersApp(App[None]):
    """Main TUI application for Kube Hoggers.

    Args:
        view: Which screen to show.
        settings: Resolved settings; ``kubeconfig`` must be set unless both
            controllers are given.
        cluster_controller: Node and pod source, built from settings when None.
        metrics_controller: Pod metrics source, built from settings when None.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        view: ViewMode,
        settings: AppSettings,
        cluster_controller: ClusterController | None = None,
        metrics_controller: MetricsController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.view_mode = view
        self.settings = settings
        self.cluster_controller = cluster_controller or ClusterController(
            settings.require_kubeconfig(), request_timeout=settings.request_timeout
        )
        self.metrics_controller = metrics_controller
        if view is ViewMode.TOP and self.metrics_controller is None:
            self.metrics_controller = MetricsController(
                settings.require_kubeconfig(), request_timeout=settings.request_timeout
            )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubehoggers.screens import ReportScreen, TopScreen

        logger.info("Starting %s view", self.view_mode.value)
        if self.view_mode is ViewMode.REPORT:
            self.push_screen(ReportScreen(self.cluster_controller))
            return

        if self.metrics_controller is None:
            raise RuntimeError("The top view needs a metrics controller")
        self.push_screen(
            TopScreen(
                self.metrics_controller,
                self.cluster_controller,
                interval=self.settings.refresh_interval,
                rows_limit=self.settings.rows_limit,
                abort_on_error=self.settings.abort_on_cycle_error,
            )
        )

    def _prepare_current_screen_for_exit(self) -> None:
        """Let the current screen stop background work before quitting."""
        if not self.screen_stack:
            return
        prepare = getattr(self.screen, "prepare_for_exit", None)
        if callable(prepare):
            with suppress(Exception):
                prepare()

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit the application."""
        self._prepare_current_screen_for_exit()
        self.exit()


__all__ = [
    "HoggersApp",
]
