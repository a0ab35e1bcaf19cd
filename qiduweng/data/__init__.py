#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五星占静态数据"""

from .constants import (
    FIVE_STARS,
    FIVE_ELEMENTS,
    EARTHLY_BRANCHES,
    HOUR_ELEMENTS,
    MONTH_GENERALS,
    ELEMENT_RELATIONS,
    PROSPERITY_STATUSES,
    PROSPERITY_TABLE,
    SEASON_MONTHS,
    FiveStar,
)

__all__ = [
    'FIVE_STARS',
    'FIVE_ELEMENTS',
    'EARTHLY_BRANCHES',
    'HOUR_ELEMENTS',
    'MONTH_GENERALS',
    'ELEMENT_RELATIONS',
    'PROSPERITY_STATUSES',
    'PROSPERITY_TABLE',
    'SEASON_MONTHS',
    'FiveStar',
]
