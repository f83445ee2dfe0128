#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
执行风格分析器

按星曜在速度、结构两个维度上的原始分值总和分四型：
指挥官（速度>=0，结构>=0）、架构师（速度<0，结构>=0）、
催化者（速度>=0，结构<0）、整合者（其余）。
"""

import logging
from typing import Dict, Any, Iterable

from ziwei.analyzers.palace_bars_analyzer import CAREER_SCORES
from ziwei.calculators.ziwei_core import normalize_star_name

logger = logging.getLogger(__name__)

COMMANDER = '指挥官 Commander'
ARCHITECT = '架构师 Architect'
CATALYST = '催化者 Catalyst'
INTEGRATOR = '整合者 Integrator'

AXES = ('speed', 'structure', 'risk', 'collab', 'clarity')


def execution_bar(value: float) -> float:
    """原始分 -> 0-100（每分 8 点，50 为中性）"""
    return max(0, min(100, 50 + value * 8))


def classify_execution(stars: Iterable[str]) -> Dict[str, Any]:
    """
    执行风格分类

    Args:
        stars: 星名列表（繁简均可）

    Returns:
        dict: {'type': 类型, 'bars': 五维评分, 'raw': 原始分}
    """
    raw = {axis: 0 for axis in AXES}
    for star in stars:
        for axis, value in CAREER_SCORES.get(normalize_star_name(star), {}).items():
            raw[axis] += value

    if raw['speed'] >= 0 and raw['structure'] >= 0:
        style = COMMANDER
    elif raw['speed'] < 0 and raw['structure'] >= 0:
        style = ARCHITECT
    elif raw['speed'] >= 0 and raw['structure'] < 0:
        style = CATALYST
    else:
        style = INTEGRATOR

    bars = {
        'decision_speed': execution_bar(raw['speed']),
        'structure_pref': execution_bar(raw['structure']),
        'risk_tolerance': execution_bar(raw['risk']),
        'collaboration': execution_bar(raw['collab']),
        'clarity_focus': execution_bar(raw['clarity']),
    }
    logger.debug(f"执行风格: {style} {raw}")
    return {'type': style, 'bars': bars, 'raw': raw}
