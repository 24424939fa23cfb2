"""Unit tests for loganalyzer.logging."""

import logging

from rich.logging import RichHandler

from loganalyzer.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a bare INFO record on logger `name`."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter_tags_third_party_records():
    """Foreign loggers get a bracketed prefix; project loggers get none."""
    prefix_filter = ThirdPartyPrefixFilter()

    foreign = make_record("urllib3.connectionpool")
    assert prefix_filter.filter(foreign) is True
    assert foreign.prefix == "[urllib3]"

    own = make_record("loganalyzer.service_layer.analyzers")
    assert prefix_filter.filter(own) is True
    assert own.prefix == ""


def test_console_handler_levels():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    debug = config_console_handler(level=logging.WARNING, debug_mode=True)
    assert debug.level == logging.DEBUG
    assert not debug.filters


def test_flight_recorder_flushes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "latest.log"
    recorder = config_flight_recorder(path, capacity=10)
    logger = logging.getLogger("loganalyzer.test.flight")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(recorder)
    try:
        logger.debug("quiet detail")
        assert not path.exists()
        logger.warning("loud problem")
        text = path.read_text(encoding="utf-8")
        assert "quiet detail" in text
        assert "loud problem" in text
    finally:
        logger.removeHandler(recorder)
        recorder.close()


def test_log_startup_summary(caplog):
    """The one-line summary is logged at INFO."""
    logger = logging.getLogger("loganalyzer.test.startup")
    with caplog.at_level(logging.DEBUG, logger="loganalyzer.test.startup"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.WARNING,
            handlers=[],
            logger_levels={"click_extra": logging.WARNING},
        )
    messages = [r.getMessage() for r in caplog.records]
    assert "LOGANALYZER 9.9.9: console=WARNING, flight-recorder=OFF" in messages
    assert any(m.startswith("Per-logger overrides:") for m in messages)


def test_log_startup_describes_flight_recorder(caplog, tmp_path):
    """Recorder settings are read from the MemoryHandler itself."""
    recorder = config_flight_recorder(tmp_path / "fr.log", capacity=7, flush_on_close=True)
    logger = logging.getLogger("loganalyzer.test.startup")
    try:
        with caplog.at_level(logging.DEBUG, logger="loganalyzer.test.startup"):
            log_startup(
                logger,
                app_version="1.0",
                level=logging.INFO,
                handlers=[recorder],
                logger_levels={},
            )
    finally:
        recorder.close()
    messages = [r.getMessage() for r in caplog.records]
    assert "LOGANALYZER 1.0: console=INFO, flight-recorder=ON" in messages
    (described,) = [m for m in messages if m.startswith("Flight recorder:")]
    assert "fr.log" in described
    assert "capacity=7" in described
    assert "flush_on_close=True" in described
    assert "Per-logger overrides: <none>" in messages
