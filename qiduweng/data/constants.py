#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五星占静态数据表

五星、十二地支、时辰五行、月将、五行生克、旺相休囚死。
所有表在导入时构建一次，只读共享。
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class FiveStar(NamedTuple):
    """五星：星名及其五行"""
    name: str
    element: str


# 五星及其五行（顺序即加星顺序）
FIVE_STARS: Tuple[FiveStar, ...] = (
    FiveStar('辰星', '水'),
    FiveStar('荧惑', '火'),
    FiveStar('岁德', '木'),
    FiveStar('太白', '金'),
    FiveStar('镇星', '土'),
)

# 五行标准顺序
FIVE_ELEMENTS: Tuple[str, ...] = ('木', '火', '土', '金', '水')

# 十二地支（寅起，顺时针）
EARTHLY_BRANCHES: Tuple[str, ...] = ('寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥', '子', '丑')

# 十二时辰五行
HOUR_ELEMENTS: Mapping[str, str] = MappingProxyType({
    '亥': '水', '子': '水',
    '寅': '木', '卯': '木',
    '巳': '火', '午': '火',
    '申': '金', '酉': '金',
    '辰': '土', '戌': '土', '丑': '土', '未': '土',
})

# 十二月将（按月序索引）
MONTH_GENERALS: Tuple[str, ...] = ('寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥', '子', '丑')

# 五行生克：generates 我生，controls 我克
ELEMENT_RELATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    '木': MappingProxyType({'generates': '火', 'controls': '土'}),
    '火': MappingProxyType({'generates': '土', 'controls': '金'}),
    '土': MappingProxyType({'generates': '金', 'controls': '水'}),
    '金': MappingProxyType({'generates': '水', 'controls': '木'}),
    '水': MappingProxyType({'generates': '木', 'controls': '火'}),
})

# 旺相休囚死（由强到弱）
PROSPERITY_STATUSES: Tuple[str, ...] = ('旺', '相', '休', '囚', '死')

# 旺相休囚死表
PROSPERITY_TABLE: Mapping[str, Mapping[str, str]] = MappingProxyType({
    '春': MappingProxyType({'木': '旺', '火': '相', '水': '休', '金': '囚', '土': '死'}),
    '夏': MappingProxyType({'火': '旺', '土': '相', '木': '休', '水': '囚', '金': '死'}),
    '秋': MappingProxyType({'金': '旺', '水': '相', '土': '休', '火': '囚', '木': '死'}),
    '冬': MappingProxyType({'水': '旺', '木': '相', '金': '休', '土': '囚', '火': '死'}),
})

# 季节对应月份
SEASON_MONTHS: Mapping[str, Tuple[int, ...]] = MappingProxyType({
    '春': (1, 2, 3),
    '夏': (4, 5, 6),
    '秋': (7, 8, 9),
    '冬': (10, 11, 12),
})

# 吉凶
FORTUNE_GOOD = '吉'
FORTUNE_BAD = '凶'
