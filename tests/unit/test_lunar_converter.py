#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""公历转排盘参数单元测试"""

import pytest

from qiduweng import calculate_divination
from qiduweng.calculators.lunar_converter import LunarConverter, calculate_divination_from_solar
from qiduweng.exceptions import InvalidSolarDateError


class TestSolarToInputs:
    def test_lunar_new_year(self):
        # 2024-02-10 为甲辰年正月初一
        inputs = LunarConverter.solar_to_divination_inputs("2024-02-10", "10:30")
        assert inputs["month"] == 1
        assert inputs["day"] == 1
        assert inputs["hour"] == "巳"
        assert inputs["is_leap_month"] is False

    def test_leap_month(self):
        # 2023-03-22 为闰二月初一
        inputs = LunarConverter.solar_to_divination_inputs("2023-03-22", "08:00")
        assert inputs["month"] == 2
        assert inputs["day"] == 1
        assert inputs["is_leap_month"] is True
        assert inputs["hour"] == "辰"

    def test_late_zi_hour(self):
        inputs = LunarConverter.solar_to_divination_inputs("2024-02-10", "23:30")
        assert inputs["hour"] == "子"

    def test_default_time_is_noon(self):
        assert LunarConverter.solar_to_divination_inputs("2024-02-10")["hour"] == "午"

    @pytest.mark.parametrize("solar_date,solar_time", [
        ("2024/02/10", "10:30"),
        ("2024-02-30", "10:30"),
        ("2024-02-10", "25:00"),
        (None, "10:30"),
    ])
    def test_invalid(self, solar_date, solar_time):
        with pytest.raises(InvalidSolarDateError):
            LunarConverter.solar_to_divination_inputs(solar_date, solar_time)


class TestFromSolar:
    def test_matches_lunar_inputs(self):
        assert calculate_divination_from_solar("2024-02-10", "10:30") == calculate_divination(1, 1, "巳")
