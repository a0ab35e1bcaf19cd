#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
旺相休囚死分析器

按月份定季节，生成当季五行旺衰表，并判断体五行强弱。
"""

from typing import Tuple

from qiduweng.calculators.validators import validate_month
from qiduweng.data.constants import FIVE_ELEMENTS, PROSPERITY_TABLE, SEASON_MONTHS
from qiduweng.exceptions import InvalidElementError, InvalidMonthError
from qiduweng.models.schemas import ProsperityEntry

# 体旺：旺、相；体衰：囚、死；休不作评语
STRONG_STATUSES = ('旺', '相')
WEAK_STATUSES = ('囚', '死')


def determine_season(month: int) -> str:
    """
    月份定季节：1-3 春，4-6 夏，7-9 秋，10-12 冬

    Raises:
        InvalidMonthError: 月份不在 1-12
    """
    validate_month(month)
    for season, months in SEASON_MONTHS.items():
        if month in months:
            return season
    raise InvalidMonthError(month)


def get_element_status(season: str, element: str) -> str:
    """查询某季某五行的旺衰状态"""
    if element not in FIVE_ELEMENTS:
        raise InvalidElementError(element)
    return PROSPERITY_TABLE[season][element]


def build_prosperity_table(season: str) -> Tuple[ProsperityEntry, ...]:
    """按木火土金水顺序生成当季旺相休囚死表"""
    season_row = PROSPERITY_TABLE[season]
    return tuple(
        ProsperityEntry(element=element, status=season_row[element])
        for element in FIVE_ELEMENTS
    )


def describe_body_strength(body_element: str, status: str) -> str:
    """体五行强弱评语，休态返回空串"""
    if status in STRONG_STATUSES:
        return f" 体（{body_element}）处于{status}态，力量较强。"
    if status in WEAK_STATUSES:
        return f" 体（{body_element}）处于{status}态，力量较弱，需借助外力。"
    return ""
