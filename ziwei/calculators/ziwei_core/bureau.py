#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行局计算模块
"""

from ziwei.data.tables import FIVE_ELEMENTS_TABLE, BUREAU_START_AGES
from ziwei.utils.exceptions import LookupMissError


def resolve_bureau(stem: str, branch: str) -> str:
    """
    命宫干支 -> 五行局

    表中每个天干只对应六个地支，组合缺失说明上游干支计算有误，直接抛错。

    Args:
        stem: 命宫天干
        branch: 命宫地支

    Returns:
        str: 水二局/木三局/金四局/土五局/火六局
    """
    bureau = FIVE_ELEMENTS_TABLE.get(stem, {}).get(branch)
    if bureau is None:
        raise LookupMissError(f"五行局表缺少组合: {stem}{branch}", table="FIVE_ELEMENTS_TABLE")
    return bureau


def bureau_start_age(bureau: str) -> int:
    """五行局 -> 大限起始年龄"""
    try:
        return BUREAU_START_AGES[bureau]
    except KeyError:
        raise LookupMissError(f"未知五行局: {bureau}", table="BUREAU_START_AGES") from None
