#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五星占异常定义

全部继承 ValueError，调用方按参数错误统一处理。
"""

from typing import Any


class DivinationError(ValueError):
    """五星占计算异常基类"""


class InvalidMonthError(DivinationError):
    """月份非法（须为 1-12 的整数）"""

    def __init__(self, month: Any):
        self.month = month
        super().__init__(f"月份非法: {month!r}，应为 1-12 的整数")


class InvalidDayError(DivinationError):
    """日期非法（须为不小于 1 的整数）"""

    def __init__(self, day: Any):
        self.day = day
        super().__init__(f"日期非法: {day!r}，应为不小于 1 的整数")


class InvalidTimeSlotError(DivinationError):
    """时辰非法（须为十二地支之一）"""

    def __init__(self, hour: Any):
        self.hour = hour
        super().__init__(f"时辰非法: {hour!r}，应为子、丑、寅、卯、辰、巳、午、未、申、酉、戌、亥之一")


class InvalidElementError(DivinationError):
    """五行非法"""

    def __init__(self, element: Any):
        self.element = element
        super().__init__(f"五行非法: {element!r}，应为木、火、土、金、水之一")


class InvalidSolarDateError(DivinationError):
    """公历日期时间格式错误"""


class InternalInvariantError(DivinationError):
    """静态数据表自相矛盾（五行生克表无法判定体用关系）"""
