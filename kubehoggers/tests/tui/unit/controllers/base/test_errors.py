"""Tests for the data operation error taxonomy."""

from __future__ import annotations

from kubehoggers.controllers.base.errors import (
    HoggersError,
    ResolutionError,
    UpstreamListingError,
)


class TestUpstreamListingError:
    """Tests for UpstreamListingError."""

    def test_message_names_source(self) -> None:
        error = UpstreamListingError("nodes", "connection refused")
        assert isinstance(error, HoggersError)
        assert error.source == "nodes"
        assert str(error) == "Failed to list nodes: connection refused"

    def test_hint_comes_first(self) -> None:
        error = UpstreamListingError("pod metrics", "not found", hint="Install it")
        assert str(error).startswith("Install it")
        assert "Failed to list pod metrics: not found" in str(error)


class TestResolutionError:
    """Tests for ResolutionError."""

    def test_carries_pod_identity(self) -> None:
        error = ResolutionError("kube-system", "coredns-1", "NotFound")
        assert isinstance(error, HoggersError)
        assert (error.namespace, error.name) == ("kube-system", "coredns-1")
        assert "kube-system/coredns-1" in str(error)
