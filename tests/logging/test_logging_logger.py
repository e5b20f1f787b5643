"""Tests for the buffered synchronous logger."""

import threading
import time

import pytest

from counterparty_unpack.logging import Logger, LoggerConfig, LogLevel, MemoryLogHandler


@pytest.fixture
def handler():
    return MemoryLogHandler()


def make_logger(handler, **config) -> Logger:
    config.setdefault("flush_interval_s", 60.0)
    return Logger(name="test", config=LoggerConfig(**config), handlers=[handler])


class TestLogger:
    def test_lines_buffer_until_flush(self, handler):
        logger = make_logger(handler)
        logger.info("hello")
        assert handler.lines == []
        logger.flush()
        assert len(handler.lines) == 1
        assert "[INFO] test - hello" in handler.lines[0]

    def test_level_filtering(self, handler):
        logger = make_logger(handler, base_level=LogLevel.WARNING)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")
        logger.flush()
        assert len(handler.lines) == 1
        assert "shown" in handler.lines[0]

    def test_error_flushes_immediately(self, handler):
        logger = make_logger(handler)
        logger.info("before")
        logger.error("boom")
        assert len(handler.lines) == 2
        assert handler.push_count == 1

    def test_full_buffer_flushes(self, handler):
        logger = make_logger(handler, buffer_size=3)
        for i in range(3):
            logger.info(f"line {i}")
        assert len(handler.lines) == 3

    def test_stale_buffer_flushes(self, handler):
        logger = make_logger(handler, flush_interval_s=0.01)
        logger.info("first")
        time.sleep(0.02)
        logger.info("second")
        assert len(handler.lines) == 2

    def test_custom_format(self, handler):
        logger = make_logger(handler, str_format="%(levelname)s|%(message)s")
        logger.warning("msg")
        logger.flush()
        assert handler.lines == ["WARNING|msg"]

    def test_set_log_level(self, handler):
        logger = make_logger(handler)
        logger.debug("hidden")
        logger.set_log_level(LogLevel.DEBUG)
        logger.debug("shown")
        logger.flush()
        assert [line.split(" - ")[-1] for line in handler.lines] == ["shown"]
        assert handler.primary_config.base_level == LogLevel.DEBUG

    def test_stdout(self, handler, capsys):
        logger = make_logger(handler, do_stout=True, str_format="%(message)s")
        logger.info("to stdout")
        logger.flush()
        assert capsys.readouterr().out == "to stdout\n"

    def test_shutdown(self, handler):
        closed = []
        handler.close = lambda: closed.append(True)
        logger = make_logger(handler)
        logger.info("pending")
        logger.shutdown()
        assert handler.lines[-1].endswith("pending")
        assert closed == [True]
        assert not logger.is_running()
        logger.info("ignored")
        logger.flush()
        assert len(handler.lines) == 1
        logger.shutdown()
        assert closed == [True]

    def test_accessors(self, handler):
        cfg = LoggerConfig()
        logger = Logger(name="acc", config=cfg, handlers=[handler])
        assert logger.get_name() == "acc"
        assert logger.get_config() is cfg
        assert handler.primary_config is cfg

    def test_rejects_non_handler(self):
        with pytest.raises(TypeError):
            Logger(handlers=[object()])

    @pytest.mark.slow
    def test_concurrent_writers(self, handler):
        logger = make_logger(handler, buffer_size=50)

        def worker(n):
            for i in range(200):
                logger.info(f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        logger.flush()
        assert len(handler.lines) == 800
