#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
旺衰分析器包
"""

from .prosperity_analyzer import (
    determine_season,
    get_element_status,
    build_prosperity_table,
    describe_body_strength,
)

__all__ = [
    'determine_season',
    'get_element_status',
    'build_prosperity_table',
    'describe_body_strength',
]
