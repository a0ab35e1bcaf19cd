#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""排盘请求/结果模型"""

from .schemas import DivinationParams, DivinationResult, ProsperityEntry, HourBranch

__all__ = ['DivinationParams', 'DivinationResult', 'ProsperityEntry', 'HourBranch']
