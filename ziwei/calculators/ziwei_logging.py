#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘日志配置

各模块使用 logging.getLogger(__name__)，统一挂在 "ziwei" 包日志器下；
服务层和命令行入口调用 setup_logging 按配置设定级别。
"""

import logging

PACKAGE_LOGGER = "ziwei"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """输出被管道截断（如 ziwei-chart | head）时静默丢弃日志"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """
    配置包日志器：首次调用时挂载 SafeStreamHandler，之后只调整级别

    Args:
        level: 日志级别名称（DEBUG/INFO/WARNING/ERROR），非法值按 INFO 处理

    Returns:
        logging.Logger: "ziwei" 包日志器
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger
