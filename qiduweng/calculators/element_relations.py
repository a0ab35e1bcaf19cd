#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
体用五行关系模块

以时辰五行为体、用星五行为用，判定体用生克关系。
"""

from enum import Enum
from typing import Mapping

from qiduweng.data.constants import ELEMENT_RELATIONS
from qiduweng.exceptions import InternalInvariantError, InvalidElementError


class Relationship(str, Enum):
    """体用关系"""
    MUTUAL_HARMONY = '比和'
    BODY_CONTROLS_USE = '体克用'
    USE_CONTROLS_BODY = '用克体'
    BODY_GENERATES_USE = '体生用'
    USE_GENERATES_BODY = '用生体'


def get_generated_element(element: str, relations: Mapping[str, Mapping[str, str]] = ELEMENT_RELATIONS) -> str:
    """获取我生的元素"""
    if element not in relations:
        raise InvalidElementError(element)
    return relations[element]['generates']


def get_controlled_element(element: str, relations: Mapping[str, Mapping[str, str]] = ELEMENT_RELATIONS) -> str:
    """获取我克的元素"""
    if element not in relations:
        raise InvalidElementError(element)
    return relations[element]['controls']


def classify_relationship(
    body_element: str,
    use_element: str,
    relations: Mapping[str, Mapping[str, str]] = ELEMENT_RELATIONS,
) -> Relationship:
    """
    判断体用关系

    按优先级依次判定：比和、体克用、用克体、体生用、用生体。
    五行闭环下任意两元素恰好命中一种。

    Args:
        body_element: 体五行（时辰五行）
        use_element: 用五行（用星五行）
        relations: 五行生克表

    Returns:
        Relationship: 体用关系

    Raises:
        InvalidElementError: 元素不在生克表中
        InternalInvariantError: 生克表无法判定该组合
    """
    if body_element == use_element:
        if body_element not in relations:
            raise InvalidElementError(body_element)
        return Relationship.MUTUAL_HARMONY

    if get_controlled_element(body_element, relations) == use_element:
        return Relationship.BODY_CONTROLS_USE
    if get_controlled_element(use_element, relations) == body_element:
        return Relationship.USE_CONTROLS_BODY
    if get_generated_element(body_element, relations) == use_element:
        return Relationship.BODY_GENERATES_USE
    if get_generated_element(use_element, relations) == body_element:
        return Relationship.USE_GENERATES_BODY

    raise InternalInvariantError(
        f"五行生克表无法判定体用关系: 体={body_element}, 用={use_element}"
    )
