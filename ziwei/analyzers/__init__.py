#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘分析模块

- palace_bars_analyzer: 命宫、财帛、官禄五维评分
- execution_style_analyzer: 执行风格四型
- wealth_code_analyzer: 财富密码
"""

from .palace_bars_analyzer import (
    BarOptions,
    PalaceBarsAnalyzer,
    compute_career_bars,
    compute_life_bars,
    compute_wealth_bars,
    palace_star_keys,
    to_bar,
)
from .execution_style_analyzer import classify_execution
from .wealth_code_analyzer import classify_wealth_codes, explain_wealth_code_votes

__all__ = [
    'BarOptions',
    'PalaceBarsAnalyzer',
    'compute_career_bars',
    'compute_life_bars',
    'compute_wealth_bars',
    'palace_star_keys',
    'to_bar',
    'classify_execution',
    'classify_wealth_codes',
    'explain_wealth_code_votes',
]
