#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五星占计算模块

提供五星占排盘的核心功能：
- 体用五行关系判定
- 月将、日宫、用星推算
- 公历转农历排盘参数
"""

from .element_relations import Relationship, classify_relationship
from .divination_calculator import (
    DivinationCalculator,
    calculate_divination,
    calculate_divination_from_params,
)
from .lunar_converter import LunarConverter, calculate_divination_from_solar

__all__ = [
    'Relationship',
    'classify_relationship',
    'DivinationCalculator',
    'calculate_divination',
    'calculate_divination_from_params',
    'LunarConverter',
    'calculate_divination_from_solar',
]
