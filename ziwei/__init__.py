#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数排盘

    from ziwei import calculate_chart
    chart = calculate_chart({'year': 1999, 'month': 12, 'day': 14, 'hour': 9, 'gender': 'male'})
"""

__version__ = '0.1.0'

from ziwei.calculators.ziwei_calculator import ZiweiCalculator, calculate_chart, with_annual_flow
from ziwei.models import BirthInput, ChartModel
from ziwei.services import ChartService

__all__ = [
    '__version__',
    'ZiweiCalculator',
    'calculate_chart',
    'with_annual_flow',
    'BirthInput',
    'ChartModel',
    'ChartService',
]
