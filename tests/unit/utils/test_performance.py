"""Tests for performance monitoring utilities."""

import time

import pytest
from loguru import logger

from ragsplit.utils.performance import timer


@pytest.fixture
def captured():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestTimer:
    """Tests for timer context manager."""

    def test_timer_basic(self, captured):
        """Timer logs the operation with elapsed time."""
        with timer("Test operation"):
            time.sleep(0.01)

        record = captured[-1]
        assert record["level"].name == "DEBUG"
        assert record["message"].startswith("Test operation took ")
        assert record["message"].endswith("ms")

    def test_timer_with_threshold(self, captured):
        """Operations faster than the threshold are not logged."""
        with timer("Fast operation", threshold_ms=1000):
            pass

        assert not any("Fast operation" in r["message"] for r in captured)

    def test_timer_exception_handling(self, captured):
        """Timer logs and re-raises on failure."""
        with pytest.raises(ValueError):
            with timer("Failing operation"):
                raise ValueError("Test error")

        assert any("Failing operation" in r["message"] for r in captured)

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING"])
    def test_timer_different_log_levels(self, captured, level):
        """Timer logs at the requested level."""
        with timer(f"{level} operation", log_level=level):
            pass

        assert captured[-1]["level"].name == level
