"""Unit tests for HoggersApp - class attributes and instantiation.

Tests avoid running the Textual event loop; screen behaviour is covered by
the smoke tests.
"""

from __future__ import annotations

import pytest
from textual.app import App
from textual.binding import Binding

from kubehoggers.app import HoggersApp
from kubehoggers.constants import APP_TITLE
from kubehoggers.constants.enums import ViewMode
from kubehoggers.controllers import ClusterController, MetricsController
from kubehoggers.keyboard.app import APP_BINDINGS
from kubehoggers.models.state.app_settings import AppSettings, CredentialsNotFoundError

# =============================================================================
# Class Attributes
# =============================================================================


class TestAppClassAttributes:
    """Test HoggersApp class-level attributes."""

    def test_app_bindings_match_app_bindings_constant(self) -> None:
        assert HoggersApp.BINDINGS is APP_BINDINGS

    def test_app_bindings_are_binding_objects(self) -> None:
        for binding in HoggersApp.BINDINGS:
            assert isinstance(binding, Binding)

    def test_quit_keys_bound(self) -> None:
        keys = {binding.key for binding in APP_BINDINGS if binding.action == "quit"}
        assert keys == {"q", "ctrl+c"}

    def test_app_css_path_value(self) -> None:
        assert "app.tcss" in str(HoggersApp.CSS_PATH)

    def test_app_title_set(self) -> None:
        assert HoggersApp.TITLE == APP_TITLE

    def test_app_inherits_from_textual_app(self) -> None:
        assert issubclass(HoggersApp, App)


# =============================================================================
# Instantiation
# =============================================================================


class TestAppInstantiation:
    """Test HoggersApp constructor and controller wiring."""

    def test_report_view_builds_cluster_controller_only(self) -> None:
        app = HoggersApp(ViewMode.REPORT, AppSettings(kubeconfig="/tmp/kubeconfig"))
        assert isinstance(app.cluster_controller, ClusterController)
        assert app.cluster_controller.kubeconfig == "/tmp/kubeconfig"
        assert app.metrics_controller is None

    def test_top_view_builds_both_controllers(self) -> None:
        settings = AppSettings(kubeconfig="/tmp/kubeconfig", request_timeout="5s")
        app = HoggersApp(ViewMode.TOP, settings)
        assert isinstance(app.metrics_controller, MetricsController)
        assert app.metrics_controller.request_timeout == "5s"

    def test_missing_kubeconfig_raises(self) -> None:
        with pytest.raises(CredentialsNotFoundError):
            HoggersApp(ViewMode.REPORT, AppSettings())

    def test_injected_controllers_used(self) -> None:
        cluster = ClusterController("/a")
        metrics = MetricsController("/b")
        app = HoggersApp(ViewMode.TOP, AppSettings(), cluster, metrics)
        assert app.cluster_controller is cluster
        assert app.metrics_controller is metrics

    def test_top_view_without_metrics_controller_fails_on_mount(self) -> None:
        """Top view refuses to start when its metrics source is missing."""
        app = HoggersApp(ViewMode.TOP, AppSettings(kubeconfig="/tmp/kubeconfig"))
        app.metrics_controller = None
        with pytest.raises(RuntimeError, match="metrics controller"):
            app.on_mount()
