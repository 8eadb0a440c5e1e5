"""
Unit tests for fleet_monitor.domain.services.memory_size
"""
import pytest

from fleet_monitor.domain.services.memory_size import is_low_memory, parse_memory_size


class TestParseMemorySize:
    """Tests for parse_memory_size"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("10GB", 10.0),
            ("10240MB", 10.0),
            ("9.4 GB", 9.4),
            ("12", 12.0),
            ("12g", 12.0),
            ("  2 gb  ", 2.0),
            ("1048576KB", 1.0),
        ],
    )
    def test_valid_values_normalized_to_gb(self, text, expected):
        size = parse_memory_size(text)
        assert size.is_valid
        assert size.value == pytest.approx(expected)

    def test_bytes(self):
        size = parse_memory_size(str(1024 ** 3) + "B")
        assert size.is_valid
        assert size.value == pytest.approx(1.0)

    @pytest.mark.parametrize("text", ["abc", "", None, "1.2.3", ".", "10 TB", "-5GB", "GB"])
    def test_invalid_values(self, text):
        size = parse_memory_size(text)
        assert size.is_valid is False
        assert size.value == 0.0


class TestIsLowMemory:
    """Tests for is_low_memory"""

    def test_below_threshold_with_memory_assigned(self):
        assert is_low_memory("5 GB", has_memory_assigned=True) is True

    def test_above_threshold(self):
        assert is_low_memory("15 GB", has_memory_assigned=True) is False

    def test_threshold_is_exclusive(self):
        assert is_low_memory("10 GB", has_memory_assigned=True) is False

    def test_no_memory_assigned(self):
        assert is_low_memory("1 GB", has_memory_assigned=False) is False

    def test_unparseable_reading_is_not_low(self):
        assert is_low_memory("unknown", has_memory_assigned=True) is False

    def test_custom_threshold(self):
        assert is_low_memory("15 GB", has_memory_assigned=True, threshold_gb=20) is True
