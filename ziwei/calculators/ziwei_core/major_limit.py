#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大限计算模块
"""

from typing import Dict

from ziwei.calculators.helpers import mod
from ziwei.calculators.ziwei_core.bureau import bureau_start_age
from ziwei.data.constants import YANG, YIN
from ziwei.utils.exceptions import InputRangeError

CLOCKWISE = 1
COUNTER_CLOCKWISE = -1

# 阳男阴女顺行，阴男阳女逆行（顺行 = 宫位序号递增）
DIRECTION_TABLE = {
    ('male', YANG): CLOCKWISE,
    ('female', YIN): CLOCKWISE,
    ('male', YIN): COUNTER_CLOCKWISE,
    ('female', YANG): COUNTER_CLOCKWISE,
}


def limit_direction(gender: str, polarity: str) -> int:
    """大限行进方向"""
    try:
        return DIRECTION_TABLE[(gender, polarity)]
    except KeyError:
        raise InputRangeError(f"无法确定大限方向: {gender}/{polarity}", field="gender") from None


def assign_major_limits(life_palace: int, bureau: str, gender: str, polarity: str) -> Dict[int, Dict[str, int]]:
    """
    大限分配

    从命宫起，每宫十年，按性别阴阳决定顺逆，首限起于五行局数。

    Args:
        life_palace: 命宫序号
        bureau: 五行局
        gender: male/female
        polarity: Yang/Yin

    Returns:
        dict: {宫位: {'start_age': int, 'end_age': int}}
    """
    start_age = bureau_start_age(bureau)
    direction = limit_direction(gender, polarity)
    limits = {}
    for i in range(12):
        palace = mod(life_palace - 1 + direction * i, 12) + 1
        limits[palace] = {
            'start_age': start_age + 10 * i,
            'end_age': start_age + 10 * i + 9,
        }
    return limits
