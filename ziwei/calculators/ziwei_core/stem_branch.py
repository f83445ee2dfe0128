#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
干支计算模块

年、月、日、时四组干支，年支阴阳，以及十二宫天干（五虎遁）。
"""

from typing import Dict, Any

from ziwei.calculators.helpers import (
    number_to_stem,
    number_to_branch,
    hour_to_branch,
    month_to_branch,
    stem_name,
    branch_name,
    stem_index,
    palace_branch,
)
from ziwei.calculators.lunar_converter import LunarConverter
from ziwei.data.constants import YANG, YIN, HEAVENLY_STEMS
from ziwei.data.tables import PALACE_STEM_START, PALACE_STEM_START_PALACE
from ziwei.utils.exceptions import LookupMissError

# 寅在地支中的序号，五虎遁从寅月起
_YIN_BRANCH = 3


def make_pillar(stem: int, branch: int) -> Dict[str, Any]:
    """构造干支对"""
    stem = number_to_stem(stem)
    branch = number_to_branch(branch)
    return {
        'stem': stem,
        'branch': branch,
        'stem_name': stem_name(stem),
        'branch_name': branch_name(branch),
    }


def year_pillar(lunar_year: int) -> Dict[str, Any]:
    """
    年干支

    Args:
        lunar_year: 农历年

    Returns:
        dict: 干支对（1984 甲子）
    """
    return make_pillar(number_to_stem(lunar_year - 3), number_to_branch(lunar_year - 3))


def polarity(year_branch: int) -> str:
    """年支阴阳：奇数序号为阳，偶数为阴"""
    return YANG if number_to_branch(year_branch) % 2 == 1 else YIN


def palace_start_stem(year_stem: str) -> str:
    """五虎遁：年干 -> 寅位起始天干"""
    try:
        return PALACE_STEM_START[year_stem]
    except KeyError:
        raise LookupMissError(f"五虎遁表缺少年干: {year_stem}", table="PALACE_STEM_START") from None


def month_pillar(year_stem: str, month: int) -> Dict[str, Any]:
    """
    月干支

    月支按 month_to_branch 取，月干由年干五虎遁起寅，按月支离寅的距离推算。
    """
    branch = month_to_branch(month)
    start = stem_index(palace_start_stem(year_stem))
    return make_pillar(start + branch - _YIN_BRANCH, branch)


def day_pillar(day_stem: int, day_branch: int) -> Dict[str, Any]:
    """日干支（由历法库给出）"""
    return make_pillar(day_stem, day_branch)


def hour_pillar(day_stem: str, hour: int) -> Dict[str, Any]:
    """时干支：时支按两小时分段，时干由日干五鼠遁推算"""
    branch = hour_to_branch(hour)
    return make_pillar(stem_index(LunarConverter.hour_stem(day_stem, branch)), branch)


def assign_palace_stems(year_stem: str) -> Dict[int, str]:
    """
    十二宫天干

    宫位 10（寅）取五虎遁起始天干，之后 11、12、1 ... 9 依次递增。

    Returns:
        dict: {宫位: 天干}
    """
    start = stem_index(palace_start_stem(year_stem))
    stems = {}
    for offset in range(12):
        palace = number_to_branch(PALACE_STEM_START_PALACE + offset)
        stems[palace] = HEAVENLY_STEMS[number_to_stem(start + offset) - 1]
    return stems


def palace_branches() -> Dict[int, str]:
    """十二宫地支（固定，宫位 1 为巳）"""
    return {palace: palace_branch(palace) for palace in range(1, 13)}
