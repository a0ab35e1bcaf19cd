#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""排盘参数校验"""

from typing import Any

from qiduweng.data.constants import EARTHLY_BRANCHES
from qiduweng.exceptions import InvalidDayError, InvalidMonthError, InvalidTimeSlotError


def _is_int(value: Any) -> bool:
    # bool 是 int 的子类，需排除
    return isinstance(value, int) and not isinstance(value, bool)


def validate_month(month: Any) -> int:
    if not _is_int(month) or not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return month


def validate_day(day: Any) -> int:
    if not _is_int(day) or day < 1:
        raise InvalidDayError(day)
    return day


def validate_hour(hour: Any) -> str:
    if not isinstance(hour, str) or hour not in EARTHLY_BRANCHES:
        raise InvalidTimeSlotError(hour)
    return hour
