#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Pydantic schema definitions for 五星占排盘."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qiduweng.calculators.validators import validate_day, validate_hour, validate_month

HourBranch = Literal['子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥']


class DivinationParams(BaseModel):
    """排盘请求参数"""
    month: int = Field(..., description="月份 (1-12)", examples=[3])
    day: int = Field(..., description="日期 (>=1)", examples=[15])
    hour: HourBranch = Field(..., description="时辰（十二地支）", examples=['辰'])

    @field_validator('month', mode='before')
    @classmethod
    def check_month(cls, v):
        return validate_month(v)

    @field_validator('day', mode='before')
    @classmethod
    def check_day(cls, v):
        return validate_day(v)

    @field_validator('hour', mode='before')
    @classmethod
    def check_hour(cls, v):
        return validate_hour(v)


class ProsperityEntry(BaseModel):
    """旺相休囚死表中的一行"""
    model_config = ConfigDict(frozen=True)

    element: str = Field(..., description="五行")
    status: str = Field(..., description="旺/相/休/囚/死")


class DivinationResult(BaseModel):
    """排盘结果"""
    model_config = ConfigDict(frozen=True)

    month_general: str = Field(..., description="月将")
    day_position: str = Field(..., description="日宫")
    use_star: str = Field(..., description="用星，如 辰星（水）")
    body_element: str = Field(..., description="体五行")
    use_element: str = Field(..., description="用五行")
    relationship: str = Field(..., description="体用关系")
    fortune: str = Field(..., description="吉凶")
    explanation: str = Field(..., description="解释说明")
    season: str = Field(..., description="季节")
    prosperity_table: Tuple[ProsperityEntry, ...] = Field(..., description="旺相休囚死表")
