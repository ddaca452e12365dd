"""
日誌與計時工具

所有模組統一透過 get_logger() 取得 "strokefilter" 底下的子 logger，
函式庫本身不會輸出到 stdout，也不會主動安裝 handler。

使用方式:
    from strokefilter.utils.logger import get_logger, enable_debug_logging

    enable_debug_logging()
    logger = get_logger("stroke.filter")
"""

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

ROOT_LOGGER_NAME = "strokefilter"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得專案 logger

    Args:
        name: 子 logger 名稱（如 "stroke.filter"），None 則回傳根 logger

    Returns:
        logging.Logger: "strokefilter" 或 "strokefilter.<name>"
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 安裝唯一的 StreamHandler 並設定等級

    重複呼叫只會調整等級，不會疊加 handler。
    """
    global _handler
    logger = get_logger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    logger.setLevel(level)
    _handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """計時資訊以 DEBUG 輸出，等同 enable_debug_logging()"""
    return enable_debug_logging()


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級記錄耗時，並呼叫選用的回呼
    callback(operation, elapsed_seconds)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)


@contextmanager
def log_timing(
    operation: str,
    logger: Optional[logging.Logger] = None,
    callback: Optional[Callable[[str, float], None]] = None,
) -> Iterator[TimingContext]:
    """TimingContext 的函式版本"""
    with TimingContext(operation, logger=logger, callback=callback) as ctx:
        yield ctx
