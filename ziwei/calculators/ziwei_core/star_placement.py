#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
安星模块

- 紫微：农历日 x 五行局查表
- 十四主星：按紫微所在地支取 12 种盘式之一
- 辅星：左輔右弼按月，文昌文曲按时支
"""

from typing import Dict, Tuple

from ziwei.calculators.helpers import branch_name, branch_to_palace
from ziwei.data.tables import (
    ZIWEI_POSITIONS,
    MAIN_STARS_TABLE,
    LEFT_SUPPORT_POSITIONS,
    RIGHT_SUPPORT_POSITIONS,
    WEN_CHANG_POSITIONS,
    WEN_QU_POSITIONS,
)
from ziwei.utils.exceptions import LookupMissError, InputRangeError


def place_ziwei(lunar_day: str, bureau: str) -> str:
    """
    紫微所在地支

    Args:
        lunar_day: 农历日中文名（初一..三十）
        bureau: 五行局

    Returns:
        str: 地支
    """
    branch = ZIWEI_POSITIONS.get(lunar_day, {}).get(bureau)
    if branch is None:
        raise LookupMissError(f"紫微表缺少组合: {lunar_day} {bureau}", table="ZIWEI_POSITIONS")
    return branch


def ziwei_palace(lunar_day: str, bureau: str) -> int:
    """紫微所在宫位序号"""
    return branch_to_palace(place_ziwei(lunar_day, bureau))


def place_main_stars(ziwei_branch: str) -> Dict[str, Tuple[str, ...]]:
    """
    十四主星分布

    Args:
        ziwei_branch: 紫微所在地支

    Returns:
        dict: {宫位地支: (主星, ...)}，每颗主星恰好出现一次，每宫至多两颗
    """
    variant = MAIN_STARS_TABLE.get(ziwei_branch)
    if variant is None:
        raise LookupMissError(f"主星表缺少紫微位置: {ziwei_branch}", table="MAIN_STARS_TABLE")
    return dict(variant)


def place_left_right(month: int) -> Tuple[str, str]:
    """
    左輔、右弼所在地支

    Args:
        month: 生月 1-12

    Returns:
        tuple: (左輔地支, 右弼地支)
    """
    if month not in LEFT_SUPPORT_POSITIONS:
        raise InputRangeError(f"月份必须在 1-12 之间: {month}", field="month")
    return LEFT_SUPPORT_POSITIONS[month], RIGHT_SUPPORT_POSITIONS[month]


def place_wenchang_wenqu(hour_branch: int) -> Tuple[str, str]:
    """
    文昌、文曲所在地支

    Args:
        hour_branch: 时支序号 1-12（与时柱相同的两小时分段）

    Returns:
        tuple: (文昌地支, 文曲地支)
    """
    if not 1 <= hour_branch <= 12:
        raise InputRangeError(f"时支序号必须在 1-12 之间: {hour_branch}", field="hour")
    key = branch_name(hour_branch)
    return WEN_CHANG_POSITIONS[key], WEN_QU_POSITIONS[key]
