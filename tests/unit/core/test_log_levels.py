"""Test log level filtering for file sinks."""

import tempfile
from pathlib import Path

import pytest

from commitprobe.core.log import (
    LEVELS,
    ConsoleSink,
    FileSink,
    LogfireSink,
    level_name,
    setup_logger,
)


@pytest.fixture
def temp_log_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def file_logger(log_dir, level, name):
    log_file = log_dir / f"{name}.log"
    logger = setup_logger(
        log_root=log_dir,
        run_name="test",
        console=ConsoleSink(enabled=False),
        file=FileSink(enabled=True, level=level, path=str(log_file)),
        logfire=LogfireSink(enabled=False),
    )
    return logger, log_file


def test_spew_level_includes_all(temp_log_dir):
    logger, log_file = file_logger(temp_log_dir, "spew", "spew")

    logger.spew("SPEW message")
    logger.trace("TRACE message")
    logger.debug("DEBUG message")
    logger.info("INFO message")
    logger.close()

    content = log_file.read_text()
    assert "SPEW message" in content
    assert "TRACE message" in content
    assert "DEBUG message" in content
    assert "INFO message" in content


def test_debug_level_filters_trace_and_spew(temp_log_dir):
    logger, log_file = file_logger(temp_log_dir, "debug", "debug")

    logger.spew("SPEW message")
    logger.trace("TRACE message")
    logger.debug("DEBUG message")
    logger.warn("WARN message")
    logger.close()

    content = log_file.read_text()
    assert "SPEW message" not in content
    assert "TRACE message" not in content
    assert "DEBUG message" in content
    assert "WARN message" in content


def test_warn_level_filters_below_warn(temp_log_dir):
    logger, log_file = file_logger(temp_log_dir, "warn", "warn")

    logger.debug("DEBUG message")
    logger.info("INFO message")
    logger.warning("WARN message")
    logger.error("ERROR message")
    logger.close()

    content = log_file.read_text()
    assert "DEBUG message" not in content
    assert "INFO message" not in content
    assert "WARN message" in content
    assert "ERROR message" in content


def test_level_ordering():
    order = ['spew', 'trace', 'debug', 'info', 'warn', 'error', 'fatal']
    values = [LEVELS[name] for name in order]

    assert values == sorted(values)
    assert LEVELS['spew'] == 1
    assert LEVELS['info'] == 9


def test_level_name_round_trip():
    for name, number in LEVELS.items():
        assert level_name(number) == name
    assert level_name(0) == "unknown"
