#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
戚都翁五星占排盘库

五星占，又称"戚都翁传未先知时课"，以五星（辰星、荧惑、岁德、太白、镇星）
为核心，通过月将、日宫、时辰的组合推算吉凶。

    >>> from qiduweng import calculate_divination
    >>> calculate_divination(3, 15, '辰').fortune
    '吉'
"""

from qiduweng.calculators import (
    DivinationCalculator,
    LunarConverter,
    Relationship,
    calculate_divination,
    calculate_divination_from_params,
    calculate_divination_from_solar,
    classify_relationship,
)
from qiduweng.data.constants import (
    EARTHLY_BRANCHES,
    ELEMENT_RELATIONS,
    FIVE_ELEMENTS,
    FIVE_STARS,
    HOUR_ELEMENTS,
    MONTH_GENERALS,
    PROSPERITY_TABLE,
)
from qiduweng.exceptions import (
    DivinationError,
    InternalInvariantError,
    InvalidDayError,
    InvalidElementError,
    InvalidMonthError,
    InvalidSolarDateError,
    InvalidTimeSlotError,
)
from qiduweng.models.schemas import DivinationParams, DivinationResult, ProsperityEntry

__version__ = '1.0.0'
VERSION = __version__

__all__ = [
    'calculate_divination',
    'calculate_divination_from_params',
    'calculate_divination_from_solar',
    'classify_relationship',
    'DivinationCalculator',
    'LunarConverter',
    'Relationship',
    'DivinationParams',
    'DivinationResult',
    'ProsperityEntry',
    'FIVE_STARS',
    'FIVE_ELEMENTS',
    'EARTHLY_BRANCHES',
    'HOUR_ELEMENTS',
    'MONTH_GENERALS',
    'ELEMENT_RELATIONS',
    'PROSPERITY_TABLE',
    'DivinationError',
    'InvalidMonthError',
    'InvalidDayError',
    'InvalidTimeSlotError',
    'InvalidElementError',
    'InvalidSolarDateError',
    'InternalInvariantError',
    'VERSION',
]
