"""Tests for PaceDecision."""

from burstpace.domain import PaceDecision


class TestPaceDecision:
    """Tests for PaceDecision."""

    def test_unpacks_as_pair(self):
        """Test tuple unpacking."""
        permitted, wait = PaceDecision(10, 0.5)

        assert permitted == 10
        assert wait == 0.5

    def test_exhausted(self):
        """Test the exhausted flag."""
        assert PaceDecision(5, 0.25).exhausted is True
        assert PaceDecision(5, 0.0).exhausted is False
