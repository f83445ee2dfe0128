#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命宫定位模块

按月份与时支查 12x12 命宫表，再从命宫起排十二宫名。
"""

from typing import Dict

from ziwei.calculators.helpers import mod, branch_to_palace
from ziwei.data.constants import PALACE_NAMES
from ziwei.data.tables import LIFE_PALACE_TABLE
from ziwei.utils.exceptions import InputRangeError


def locate_life_palace(month: int, hour_branch: int) -> str:
    """
    查命宫地支

    Args:
        month: 农历月 1-12（闰月按本月）
        hour_branch: 时支序号 1-12

    Returns:
        str: 命宫地支
    """
    if not 1 <= month <= 12:
        raise InputRangeError(f"月份必须在 1-12 之间: {month}", field="month")
    if not 1 <= hour_branch <= 12:
        raise InputRangeError(f"时支序号必须在 1-12 之间: {hour_branch}", field="hour")
    return LIFE_PALACE_TABLE[month - 1][hour_branch - 1]


def life_palace_number(month: int, hour_branch: int) -> int:
    """命宫所在宫位序号"""
    return branch_to_palace(locate_life_palace(month, hour_branch))


def assign_palace_names(life_palace: int) -> Dict[int, str]:
    """
    从命宫起排宫名

    第 i 个宫名（命宫、兄弟、夫妻……）落在宫位 ((life - 1 - i) mod 12) + 1。

    Returns:
        dict: {宫位: 宫名}
    """
    return {
        mod(life_palace - 1 - i, 12) + 1: name
        for i, name in enumerate(PALACE_NAMES)
    }

