#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""环境配置"""

from .env_config import EnvConfig, get_env_config, reset_env_config, is_production

__all__ = ['EnvConfig', 'get_env_config', 'reset_env_config', 'is_production']
