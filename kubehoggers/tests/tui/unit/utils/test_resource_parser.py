"""Tests for resource quantity parsing."""

from __future__ import annotations

import pytest

from kubehoggers.utils.resource_parser import parse_cpu_millicores, parse_memory_bytes


class TestParseCpuMillicores:
    """Tests for parse_cpu_millicores."""

    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [
            ("100m", 100),
            ("1500m", 1500),
            ("2", 2000),
            ("1.5", 1500),
            ("0.25", 250),
            ("500000000n", 500),
            ("250000u", 250),
            ("1e-1", 100),
        ],
    )
    def test_parses_kubernetes_formats(self, quantity: str, expected: int) -> None:
        """Test suffixed, decimal and exponent CPU quantities."""
        assert parse_cpu_millicores(quantity) == expected

    def test_fractional_millicores_round_up(self) -> None:
        """Test sub-millicore remainders are rounded up."""
        assert parse_cpu_millicores("1n") == 1
        assert parse_cpu_millicores("1.0001") == 1001

    def test_surrounding_whitespace_ignored(self) -> None:
        """Test whitespace around the quantity is stripped."""
        assert parse_cpu_millicores(" 250m ") == 250

    @pytest.mark.parametrize("quantity", [None, "", "abc", "12x", "nan", "inf"])
    def test_invalid_returns_zero(self, quantity: str | None) -> None:
        """Test unparseable quantities yield zero."""
        assert parse_cpu_millicores(quantity) == 0


class TestParseMemoryBytes:
    """Tests for parse_memory_bytes."""

    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [
            ("1Ki", 1024),
            ("128Mi", 128 * 1024**2),
            ("2Gi", 2 * 1024**3),
            ("1Ti", 1024**4),
            ("1.5Ki", 1536),
            ("1k", 1000),
            ("129M", 129_000_000),
            ("2G", 2_000_000_000),
            ("129e6", 129_000_000),
            ("134217728", 134_217_728),
        ],
    )
    def test_parses_kubernetes_formats(self, quantity: str, expected: int) -> None:
        """Test binary, decimal, exponent and plain memory quantities."""
        assert parse_memory_bytes(quantity) == expected

    def test_fractional_bytes_round_up(self) -> None:
        """Test fractional byte counts are rounded up."""
        assert parse_memory_bytes("0.5") == 1

    @pytest.mark.parametrize("quantity", [None, "", "lots", "1Xi", "Mi"])
    def test_invalid_returns_zero(self, quantity: str | None) -> None:
        """Test unparseable quantities yield zero."""
        assert parse_memory_bytes(quantity) == 0


class TestCrossResourceSuffixes:
    """Tests for suffixes that belong to the other resource's usual notation."""

    def test_memory_in_millibytes(self) -> None:
        """Test the API server's serialization of a 1.2Gi memory request."""
        assert parse_memory_bytes("1288490188800m") == 1288490189
        assert parse_memory_bytes("1288490188800m") == parse_memory_bytes("1.2Gi")

    def test_memory_in_micro_and_nano_units(self) -> None:
        assert parse_memory_bytes("2048000u") == 3
        assert parse_memory_bytes("1000000000n") == 1

    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [
            ("1k", 1_000_000),
            ("2M", 2_000_000_000),
            ("1Ki", 1_024_000),
            ("0.5Mi", 524_288_000),
        ],
    )
    def test_cpu_with_memory_style_suffixes(self, quantity: str, expected: int) -> None:
        assert parse_cpu_millicores(quantity) == expected
