from __future__ import annotations
import sys
from typing import Any
from loguru import logger


def setup_logging(level: str = "INFO", sink: Any = None) -> int:
    """替换 loguru 默认 sink，返回新 handler id。"""
    logger.remove()
    return logger.add(sink if sink is not None else sys.stderr, level=str(level).upper(),
                      format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}")
