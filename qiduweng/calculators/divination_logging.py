#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五星占模块共享日志工具

提供安全的日志输出函数，捕获 Broken pipe 等异常。
日志级别由 qiduweng.config.env_config 决定。
"""

import logging

from qiduweng.config.env_config import get_env_config


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger("qiduweng")
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(get_env_config().log_level)


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    嵌入 Web 服务时，客户端断开连接可能触发 Broken pipe 错误
    """
    try:
        if level == 'info':
            logger.info(message)
        elif level == 'warning':
            logger.warning(message)
        elif level == 'error':
            logger.error(message)
        elif level == 'debug':
            logger.debug(message)
        else:
            logger.info(message)
    except (BrokenPipeError, OSError):
        pass
