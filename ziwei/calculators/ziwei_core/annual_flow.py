#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
流年计算模块

流年落宫以建盘时记录的锚点（基准年落基准宫）按 12 年循环推算。
"""

from typing import Dict, Any

from ziwei.calculators.helpers import mod, number_to_stem, number_to_branch, stem_name, branch_name


def year_stem_branch(year: int) -> Dict[str, Any]:
    """公历年份的流年干支（六十甲子，1984 为甲子）"""
    stem = number_to_stem(year - 3)
    branch = number_to_branch(year - 3)
    return {
        'stem': stem,
        'branch': branch,
        'heavenly_stem': stem_name(stem),
        'earthly_branch': branch_name(branch),
    }


def flow_palace(target_year: int, base_year: int, base_palace: int) -> int:
    """目标年份落宫"""
    return mod(target_year - base_year + base_palace - 1, 12) + 1


def map_annual_flow(target_year: int, base_year: int = 2013, base_palace: int = 1) -> Dict[str, Any]:
    """
    流年映射

    Args:
        target_year: 目标年份
        base_year: 锚点年份
        base_palace: 锚点宫位

    Returns:
        dict: {'year', 'palace', 'stem', 'branch', 'heavenly_stem', 'earthly_branch'}
    """
    result = {'year': target_year, 'palace': flow_palace(target_year, base_year, base_palace)}
    result.update(year_stem_branch(target_year))
    return result


def palace_flow_years(target_year: int, base_year: int = 2013, base_palace: int = 1) -> Dict[int, Dict[str, Any]]:
    """
    目标年份所在 12 年循环中，各宫对应的流年

    循环以锚点对齐：锚点宫位为循环首年，如锚点 2013 时 2030 所在循环为 2025-2036。

    Returns:
        dict: {宫位: {'year', 'heavenly_stem', 'earthly_branch'}}
    """
    cycle_start = target_year - mod(target_year - base_year, 12)
    flows = {}
    for number in range(1, 13):
        year = cycle_start + mod(number - base_palace, 12)
        info = year_stem_branch(year)
        flows[number] = {
            'year': year,
            'heavenly_stem': info['heavenly_stem'],
            'earthly_branch': info['earthly_branch'],
        }
    return flows
