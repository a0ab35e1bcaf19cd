#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from datetime import datetime
from typing import Any, Dict, Optional

from lunar_python import Solar

from qiduweng.calculators.divination_calculator import calculate_divination
from qiduweng.calculators.divination_logging import safe_log
from qiduweng.exceptions import InvalidSolarDateError
from qiduweng.models.schemas import DivinationResult


class LunarConverter:
    """公历转五星占排盘参数（农历月、农历日、时辰）"""

    @staticmethod
    def _parse(solar_date: str, solar_time: Optional[str]) -> datetime:
        try:
            date_part = datetime.strptime(solar_date, '%Y-%m-%d')
            if solar_time:
                time_part = datetime.strptime(solar_time, '%H:%M')
            else:
                time_part = datetime.strptime('12:00', '%H:%M')  # 默认中午12点
        except (TypeError, ValueError) as e:
            raise InvalidSolarDateError(
                f"公历日期时间格式错误: {solar_date!r} {solar_time!r}，应为 YYYY-MM-DD 与 HH:MM"
            ) from e
        return date_part.replace(hour=time_part.hour, minute=time_part.minute)

    @staticmethod
    def solar_to_divination_inputs(solar_date: str, solar_time: Optional[str] = None) -> Dict[str, Any]:
        """
        将公历日期时间转换为排盘参数
        23:00-23:59 不换日，时辰取子。闰月按本月月序起月将。

        Args:
            solar_date: 公历日期，格式 'YYYY-MM-DD'
            solar_time: 公历时间，格式 'HH:MM'，可选

        Returns:
            dict: month, day, hour, is_leap_month, lunar_month_name, lunar_day_name
        """
        dt = LunarConverter._parse(solar_date, solar_time)

        solar = Solar.fromYmdHms(dt.year, dt.month, dt.day, dt.hour, dt.minute, 0)
        lunar = solar.getLunar()

        lunar_month = lunar.getMonth()
        hour_branch = '子' if dt.hour >= 23 else lunar.getTimeZhi()

        inputs = {
            'month': abs(lunar_month),
            'day': lunar.getDay(),
            'hour': hour_branch,
            'is_leap_month': lunar_month < 0,
            'lunar_month_name': lunar.getMonthInChinese(),
            'lunar_day_name': lunar.getDayInChinese(),
        }
        safe_log('debug', f"公历 {solar_date} {solar_time or ''} -> 农历 {inputs['month']}月{inputs['day']}日{hour_branch}时")
        return inputs


def calculate_divination_from_solar(solar_date: str, solar_time: Optional[str] = None) -> DivinationResult:
    """按公历日期时间排盘"""
    inputs = LunarConverter.solar_to_divination_inputs(solar_date, solar_time)
    return calculate_divination(inputs['month'], inputs['day'], inputs['hour'])
