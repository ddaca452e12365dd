"""
日誌工具測試
"""

import logging

from strokefilter.utils import logger as logger_module
from strokefilter.utils.logger import TimingContext, get_logger, log_timing, setup_logger


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("stroke.filter").name == "strokefilter.stroke.filter"
        assert get_logger().name == "strokefilter"
        assert get_logger("strokefilter.database").name == "strokefilter.database"


class TestSetupLogger:
    def test_single_handler(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_handler", None)
        root = get_logger()
        before = list(root.handlers)
        try:
            setup_logger(logging.DEBUG)
            setup_logger(logging.INFO)
            added = [h for h in root.handlers if h not in before]
            assert len(added) == 1
            assert root.level == logging.INFO
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
            root.setLevel(logging.NOTSET)


class TestTiming:
    def test_callback(self):
        calls = []
        with TimingContext("op", callback=lambda op, elapsed: calls.append((op, elapsed))) as t:
            pass
        assert calls[0][0] == "op"
        assert calls[0][1] == t.elapsed >= 0

    def test_log_timing(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="strokefilter"):
            with log_timing("load"):
                pass
        assert "[Timing] load" in caplog.text
