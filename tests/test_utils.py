"""Tests for logging and timing utilities."""

import logging

import pytest

from jumphash import Timer, get_logger


def test_get_logger_idempotent(tmp_path):
    """Test that repeated calls do not duplicate handlers."""
    log_file = tmp_path / "logs" / "bench.log"
    logger = get_logger("jumphash-test", log_file=log_file)
    count = len(logger.handlers)

    again = get_logger("jumphash-test", log_file=log_file)
    assert again is logger
    assert len(again.handlers) == count


def test_get_logger_writes_file(tmp_path):
    """Test that messages reach the log file."""
    log_file = tmp_path / "run.log"
    logger = get_logger("jumphash-file-test", log_file=log_file, level=logging.DEBUG)
    logger.info("bucket=%d", 677)
    for handler in logger.handlers:
        handler.flush()
    assert "bucket=677" in log_file.read_text()


def test_timer_collects_laps():
    """Test that each lap is recorded and summarized."""
    t = Timer("noop")
    for _ in range(3):
        with t.lap():
            sum(range(100))

    assert len(t.laps) == 3
    assert all(lap >= 0.0 for lap in t.laps)
    assert t.avg_time == pytest.approx(sum(t.laps) / 3)

    summary = t.summary(num_items=100)
    assert summary["trials"] == 3
    assert summary["avg_time"] == t.avg_time
    assert summary["throughput"] >= 0.0


def test_timer_without_laps():
    """Test that summarizing before any lap raises."""
    with pytest.raises(ValueError):
        Timer("unused").summary(10)


def test_timer_rejects_unknown_device():
    """Test device validation."""
    with pytest.raises(ValueError):
        Timer("bad", device="tpu")
