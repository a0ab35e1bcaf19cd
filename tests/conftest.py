#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_divination_request() -> Dict[str, Any]:
    """
    示例排盘请求

    Returns:
        排盘请求字典
    """
    return {
        "month": 3,
        "day": 15,
        "hour": "辰",
    }


@pytest.fixture(scope="function")
def calculator():
    """
    默认数据表的排盘计算器

    Returns:
        DivinationCalculator 实例
    """
    from qiduweng.calculators.divination_calculator import DivinationCalculator
    return DivinationCalculator()


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """
    清空环境相关变量并重置配置单例

    Yields:
        monkeypatch 对象
    """
    from qiduweng.config.env_config import reset_env_config
    for var in ("ENV", "APP_ENV", "QIDUWENG_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_env_config()
    yield monkeypatch
    reset_env_config()


# ==================== Pytest Hooks ====================

def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    根据路径自动添加标记
    """
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
