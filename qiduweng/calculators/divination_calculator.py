#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
戚都翁五星占排盘计算器

排盘步骤：
1. 寅上起月：按月序取月将
2. 月上起日：从月将落宫顺数到日落宫
3. 日上加星：从日落宫按五星顺序加到时辰落宫，得用星
4. 时辰五行为体，用星五行为用，判定体用关系与吉凶
5. 按季节取旺相休囚死，补充体五行强弱评语

全部为只读查表与取模运算，无共享可变状态，可并发调用。
"""

from typing import Mapping, Sequence, Tuple

from qiduweng.analyzers.prosperity_analyzer import (
    build_prosperity_table,
    describe_body_strength,
    determine_season,
    get_element_status,
)
from qiduweng.calculators.divination_logging import safe_log
from qiduweng.calculators.element_relations import Relationship, classify_relationship
from qiduweng.calculators.validators import validate_day, validate_hour, validate_month
from qiduweng.data.constants import (
    EARTHLY_BRANCHES,
    ELEMENT_RELATIONS,
    FIVE_STARS,
    FORTUNE_BAD,
    FORTUNE_GOOD,
    HOUR_ELEMENTS,
    MONTH_GENERALS,
    FiveStar,
)
from qiduweng.exceptions import DivinationError
from qiduweng.models.schemas import DivinationParams, DivinationResult

# 体用关系 -> (吉凶, 解释)
FORTUNE_RULES: Mapping[Relationship, Tuple[str, str]] = {
    Relationship.BODY_CONTROLS_USE: (
        FORTUNE_GOOD, "体克用为吉，表示你能够掌控局面，主动权在手，事情发展对你有利。"),
    Relationship.USE_CONTROLS_BODY: (
        FORTUNE_BAD, "用克体为凶，表示受到外界制约，处于被动局面，需谨慎行事，避免冲突。"),
    Relationship.BODY_GENERATES_USE: (
        FORTUNE_BAD, "体生用为凶，表示付出多而回报少，容易耗损自身精力，需注意保存实力。"),
    Relationship.USE_GENERATES_BODY: (
        FORTUNE_GOOD, "用生体为吉，表示能得到外界帮助和支持，贵人相助，事半功倍。"),
    Relationship.MUTUAL_HARMONY: (
        FORTUNE_GOOD, "比和为吉，表示五行相同，气场和谐，事情发展平稳顺利。"),
}


def format_use_star(star: FiveStar) -> str:
    """用星显示格式：星名（五行）"""
    return f"{star.name}（{star.element}）"


class DivinationCalculator:
    """五星占排盘计算器"""

    def __init__(
        self,
        five_stars: Sequence[FiveStar] = FIVE_STARS,
        branches: Sequence[str] = EARTHLY_BRANCHES,
        month_generals: Sequence[str] = MONTH_GENERALS,
        hour_elements: Mapping[str, str] = HOUR_ELEMENTS,
        element_relations: Mapping[str, Mapping[str, str]] = ELEMENT_RELATIONS,
    ):
        self.five_stars = tuple(five_stars)
        self.branches = tuple(branches)
        self.month_generals = tuple(month_generals)
        self.hour_elements = hour_elements
        self.element_relations = element_relations

    def get_month_general(self, month: int) -> Tuple[str, int]:
        """寅上起月：返回 (月将, 月将落宫索引)"""
        month_general = self.month_generals[(month - 1) % 12]
        return month_general, self.branches.index(month_general)

    def get_day_position(self, month_position_index: int, day: int) -> Tuple[str, int]:
        """月上起日：返回 (日宫, 日宫索引)"""
        day_position_index = (month_position_index + day - 1) % 12
        return self.branches[day_position_index], day_position_index

    def get_use_star(self, day_position_index: int, hour: str) -> FiveStar:
        """日上加星：从日宫顺数到时辰落宫，按五星循环取用星"""
        hour_index = self.branches.index(hour)
        steps_from_day = (hour_index - day_position_index + 12) % 12
        return self.five_stars[steps_from_day % len(self.five_stars)]

    def calculate(self, month: int, day: int, hour: str) -> DivinationResult:
        """
        计算五星占排盘结果

        Args:
            month: 月份 (1-12)
            day: 日期 (>=1)
            hour: 时辰 (子、丑、寅、卯、辰、巳、午、未、申、酉、戌、亥)

        Returns:
            DivinationResult: 排盘结果

        Raises:
            InvalidMonthError / InvalidDayError / InvalidTimeSlotError: 参数非法
            InternalInvariantError: 五行生克表无法判定体用关系
        """
        try:
            validate_month(month)
            validate_day(day)
            validate_hour(hour)
        except DivinationError as e:
            safe_log('warning', f"排盘参数非法: {e}")
            raise

        safe_log('debug', f"开始排盘 - 月: {month}, 日: {day}, 时: {hour}")

        month_general, month_position_index = self.get_month_general(month)
        safe_log('debug', f"   步骤1 寅上起月: 月将 {month_general}")

        day_position, day_position_index = self.get_day_position(month_position_index, day)
        safe_log('debug', f"   步骤2 月上起日: 日宫 {day_position}")

        use_star = self.get_use_star(day_position_index, hour)
        safe_log('debug', f"   步骤3 日上加星: 用星 {format_use_star(use_star)}")

        body_element = self.hour_elements[hour]
        use_element = use_star.element

        try:
            relationship = classify_relationship(body_element, use_element, self.element_relations)
        except DivinationError as e:
            safe_log('error', f"体用关系判定失败: {e}")
            raise
        fortune, explanation = FORTUNE_RULES[relationship]
        safe_log('debug', f"   步骤4 体用: 体 {body_element}, 用 {use_element}, {relationship.value} -> {fortune}")

        season = determine_season(month)
        prosperity_table = build_prosperity_table(season)
        body_status = get_element_status(season, body_element)
        explanation += describe_body_strength(body_element, body_status)
        safe_log('debug', f"   步骤5 旺衰: {season}季, 体 {body_element} {body_status}")

        result = DivinationResult(
            month_general=month_general,
            day_position=day_position,
            use_star=format_use_star(use_star),
            body_element=body_element,
            use_element=use_element,
            relationship=relationship.value,
            fortune=fortune,
            explanation=explanation,
            season=season,
            prosperity_table=prosperity_table,
        )
        safe_log('info', f"排盘完成 - {month}月{day}日{hour}时: {relationship.value} {fortune}")
        return result


_default_calculator = DivinationCalculator()


def calculate_divination(month: int, day: int, hour: str) -> DivinationResult:
    """计算五星占排盘结果（使用默认数据表）"""
    return _default_calculator.calculate(month, day, hour)


def calculate_divination_from_params(params: DivinationParams) -> DivinationResult:
    """按已校验的请求模型排盘"""
    return _default_calculator.calculate(params.month, params.day, params.hour)
