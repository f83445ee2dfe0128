#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块：异常定义、排盘结果缓存
"""

from .exceptions import (
    ZiweiError,
    InputRangeError,
    DateRangeError,
    LookupMissError,
    StarResolutionAmbiguity,
    CalendarConversionDegraded,
)

__all__ = [
    'ZiweiError',
    'InputRangeError',
    'DateRangeError',
    'LookupMissError',
    'StarResolutionAmbiguity',
    'CalendarConversionDegraded',
]
