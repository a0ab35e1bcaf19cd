#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
环境配置

只影响日志级别，排盘计算本身不读取任何配置。
"""

import os
from typing import Literal, Optional

# 环境类型定义
Environment = Literal["local", "staging", "production"]

LOG_LEVEL_ENV_VAR = "QIDUWENG_LOG_LEVEL"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvConfig:
    """环境配置管理器"""

    def __init__(self):
        self._env: Environment = "local"
        self._detect_environment()

    def _detect_environment(self):
        """检测当前环境，优先读取 ENV，其次 APP_ENV，默认 local"""
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()

        if env_value in ("staging", "stage"):
            self._env = "staging"
        elif env_value in ("prod", "production"):
            self._env = "production"
        else:
            # local/dev/development 及未知值均视为本地开发
            self._env = "local"

    @property
    def env(self) -> Environment:
        """当前环境"""
        return self._env

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    @property
    def is_local_dev(self) -> bool:
        return self._env == "local"

    @property
    def log_level(self) -> str:
        """
        日志级别

        QIDUWENG_LOG_LEVEL 优先；未设置或非法时生产环境为 WARNING，其余为 INFO。
        """
        value = (os.getenv(LOG_LEVEL_ENV_VAR) or "").upper()
        if value in _VALID_LOG_LEVELS:
            return value
        return "WARNING" if self.is_production else "INFO"


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config() -> None:
    """丢弃缓存的单例，下次调用重新读取环境变量"""
    global _env_config
    _env_config = None


def is_production() -> bool:
    """是否为生产环境（便捷函数）"""
    return get_env_config().is_production
