#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘通用数值工具

天干 1-10、地支 1-12、宫位 1-12 均为 1 起始，
取模一律使用 ((n - 1) mod base) + 1，避免 0 起始取模带来的错位。
"""

from typing import Optional

from ziwei.data.constants import (
    HEAVENLY_STEMS,
    EARTHLY_BRANCHES,
    LUNAR_DAY_NAMES,
    UNKNOWN_MARKER,
    PALACE_ONE_BRANCH_INDEX,
)
from ziwei.utils.exceptions import InputRangeError, LookupMissError


def mod(n: int, base: int) -> int:
    """非负取模"""
    return ((n % base) + base) % base


def number_to_stem(n: int) -> int:
    """任意整数归约到天干序号 1-10"""
    return mod(n - 1, 10) + 1


def number_to_branch(n: int) -> int:
    """任意整数归约到地支序号 1-12"""
    return mod(n - 1, 12) + 1


def hour_to_branch(hour: int) -> int:
    """
    小时 -> 时支序号

    23:00-00:59 为子（1），之后每两小时递增一位。

    Args:
        hour: 0-23

    Returns:
        int: 地支序号 1-12
    """
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InputRangeError(f"时辰必须在 0-23 之间: {hour}", field="hour")
    return mod((hour + 1) // 2, 12) + 1


def month_to_branch(month: int) -> int:
    """月份 -> 月支序号"""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InputRangeError(f"月份必须在 1-12 之间: {month}", field="month")
    return mod(month + 2, 12) + 1


def stem_name(stem: int) -> str:
    return HEAVENLY_STEMS[number_to_stem(stem) - 1]


def branch_name(branch: int) -> str:
    return EARTHLY_BRANCHES[number_to_branch(branch) - 1]


def stem_index(name: str) -> int:
    """天干名 -> 序号 1-10"""
    try:
        return HEAVENLY_STEMS.index(name) + 1
    except ValueError:
        raise LookupMissError(f"未知天干: {name}", table="HEAVENLY_STEMS") from None


def branch_index(name: str) -> int:
    """地支名 -> 序号 1-12"""
    try:
        return EARTHLY_BRANCHES.index(name) + 1
    except ValueError:
        raise LookupMissError(f"未知地支: {name}", table="EARTHLY_BRANCHES") from None


def palace_branch(palace: int) -> str:
    """宫位 -> 地支（宫位 1 为巳）"""
    return EARTHLY_BRANCHES[mod(palace - 1 + PALACE_ONE_BRANCH_INDEX, 12)]


def branch_to_palace(branch: str) -> int:
    """地支 -> 宫位（子为宫位 8，寅为宫位 10）"""
    return mod(branch_index(branch) - 1 - PALACE_ONE_BRANCH_INDEX, 12) + 1


def palace_distance(from_palace: int, to_palace: int) -> int:
    """从 from 顺数到 to 的宫数（同宫为 1）"""
    return mod(to_palace - from_palace, 12) + 1


def opposite_palace(palace: int) -> int:
    """对宫序号"""
    return mod(palace + 5, 12) + 1


def lunar_day_string(day: Optional[int]) -> str:
    """
    农历日 -> 中文日名

    Args:
        day: 1-30

    Returns:
        str: 初一..三十，非法输入返回“未知”
    """
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 30:
        return UNKNOWN_MARKER
    return LUNAR_DAY_NAMES[day - 1]
