"""日志初始化"""

import logging
from typing import Optional

from .config import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """程序启动时调用一次（命令行入口）"""
    config = config or LoggingConfig()
    logging.basicConfig(
        level=config.numeric_level,
        format=config.fmt,
        datefmt=config.datefmt,
    )
    logging.getLogger("carddeck").setLevel(config.numeric_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
