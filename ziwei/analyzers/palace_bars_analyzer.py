#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
宫位星曜评分分析器

功能：
- 命宫（性格五维）、财帛（理财五维）、官禄（执行五维）评分条
- 每颗星在各维度有 -3..+3 的分值，主星权重 1，辅助星权重 0.5
- 按当盘动态归一化：sum / cap 映射到 0..100，再整体上抬到中性 70、下限 60

输出均为 0-100 的整数。
"""

import math
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple, Iterable, Optional

from ziwei.calculators.ziwei_core import normalize_star_name
from ziwei.data.constants import LIFE_PALACE_NAME, WEALTH_PALACE_NAME, CAREER_PALACE_NAME

logger = logging.getLogger(__name__)

FLOOR_MODE_HARD = 'hard'
FLOOR_MODE_RESCALE = 'rescale'

# 官禄宫：决策速度 / 结构偏好 / 风险承受 / 协作 / 清晰专注
CAREER_SCORES: Dict[str, Dict[str, int]] = {
    '紫微': {'structure': 2, 'speed': -1, 'collab': 1, 'clarity': 1},
    '破军': {'speed': 2, 'structure': -2, 'risk': 3, 'collab': -1, 'clarity': -1},
    '天府': {'structure': 2, 'speed': -1, 'risk': -1, 'collab': 1},
    '廉贞': {'speed': 1, 'structure': -1, 'risk': 1},
    '太阴': {'speed': -2, 'structure': 1, 'collab': 2, 'risk': -1, 'clarity': 1},
    '贪狼': {'speed': 2, 'structure': -2, 'risk': 2, 'collab': 1, 'clarity': -1},
    '巨门': {'structure': 1, 'speed': -1, 'clarity': 1},
    '天同': {'speed': -2, 'collab': 2, 'risk': -1},
    '天相': {'structure': 2, 'speed': -1, 'collab': 1, 'clarity': 1, 'risk': -1},
    '武曲': {'structure': 1, 'speed': 1, 'risk': 1},
    '天梁': {'structure': 2, 'speed': -1, 'collab': 1, 'clarity': 1, 'risk': -1},
    '太阳': {'speed': 2, 'collab': 1, 'risk': 1},
    '七杀': {'speed': 2, 'risk': 2, 'collab': -1},
    '天机': {'speed': -2, 'structure': 1, 'clarity': 2},
    '左辅': {'collab': 1, 'structure': 1},
    '右弼': {'collab': 1, 'structure': 1},
    '文昌': {'structure': 2, 'clarity': 1},
    '文曲': {'structure': 2, 'clarity': 1},
}

# 命宫：自我认同 / 行动力 / 适应力 / 情绪稳定 / 判断力
LIFE_SCORES: Dict[str, Dict[str, int]] = {
    '紫微': {'identity': 2, 'drive': 0, 'adapt': -1, 'poise': 1, 'clarity': 1},
    '破军': {'identity': 1, 'drive': 2, 'adapt': 2, 'poise': -2, 'clarity': -1},
    '天府': {'identity': 1, 'drive': -1, 'adapt': -1, 'poise': 2, 'clarity': 1},
    '廉贞': {'identity': 1, 'drive': 1, 'adapt': 1, 'poise': -1, 'clarity': 0},
    '太阴': {'identity': 0, 'drive': -1, 'adapt': 1, 'poise': 2, 'clarity': 1},
    '贪狼': {'identity': 1, 'drive': 2, 'adapt': 2, 'poise': -1, 'clarity': -1},
    '巨门': {'identity': 0, 'drive': -1, 'adapt': 0, 'poise': -1, 'clarity': 1},
    '天同': {'identity': 0, 'drive': -2, 'adapt': 1, 'poise': 2, 'clarity': 0},
    '天相': {'identity': 1, 'drive': 0, 'adapt': 1, 'poise': 1, 'clarity': 1},
    '武曲': {'identity': 1, 'drive': 2, 'adapt': -1, 'poise': 0, 'clarity': 1},
    '天梁': {'identity': 1, 'drive': -1, 'adapt': 0, 'poise': 2, 'clarity': 1},
    '太阳': {'identity': 2, 'drive': 2, 'adapt': 1, 'poise': -1, 'clarity': 1},
    '七杀': {'identity': 1, 'drive': 3, 'adapt': 1, 'poise': -2, 'clarity': -1},
    '天机': {'identity': 0, 'drive': -1, 'adapt': 2, 'poise': -1, 'clarity': 2},
    '左辅': {'identity': 0, 'drive': 0, 'adapt': 1, 'poise': 1, 'clarity': 1},
    '右弼': {'identity': 0, 'drive': 0, 'adapt': 1, 'poise': 1, 'clarity': 1},
    '文昌': {'identity': 0, 'drive': 0, 'adapt': 0, 'poise': 0, 'clarity': 2},
    '文曲': {'identity': 1, 'drive': 0, 'adapt': 0, 'poise': 1, 'clarity': 2},
}

# 财帛宫：赚钱驱动 / 资产策略 / 风险杠杆 / 理财纪律 / 人脉资源
WEALTH_SCORES: Dict[str, Dict[str, int]] = {
    '紫微': {'asset': 2, 'discipline': 1, 'dealflow': 1},
    '破军': {'earning': 2, 'asset': -1, 'risk': 3, 'discipline': -1},
    '天府': {'asset': 2, 'earning': -1, 'discipline': 1, 'risk': -1},
    '廉贞': {'earning': 1, 'asset': -1, 'risk': 1, 'dealflow': 1},
    '太阴': {'earning': -1, 'asset': 1, 'discipline': 2, 'risk': -1},
    '贪狼': {'earning': 2, 'asset': -1, 'risk': 2, 'discipline': -2, 'dealflow': 2},
    '巨门': {'earning': -1, 'asset': 1, 'discipline': 1},
    '天同': {'earning': -1, 'discipline': 1, 'risk': -1, 'dealflow': 1},
    '天相': {'asset': 2, 'discipline': 1, 'risk': -1},
    '武曲': {'earning': 2, 'asset': 1, 'discipline': 1, 'risk': 1},
    '天梁': {'asset': 2, 'discipline': 1, 'risk': -1, 'dealflow': 1},
    '太阳': {'earning': 2, 'dealflow': 1, 'risk': 1},
    '七杀': {'earning': 2, 'risk': 2, 'discipline': -1},
    '天机': {'asset': 2, 'dealflow': 1},
    '左辅': {'discipline': 1, 'asset': 1, 'dealflow': 1},
    '右弼': {'discipline': 1, 'asset': 1, 'dealflow': 1},
    '文昌': {'asset': 2, 'discipline': 1},
    '文曲': {'asset': 1, 'discipline': 1, 'dealflow': 1},
}

# 输出字段 -> 维度
CAREER_BAR_AXES = (
    ('decision_speed', 'speed'),
    ('structure_pref', 'structure'),
    ('risk_tolerance', 'risk'),
    ('collaboration', 'collab'),
    ('clarity_focus', 'clarity'),
)

LIFE_BAR_AXES = (
    ('identity_confidence', 'identity'),
    ('drive_initiative', 'drive'),
    ('adaptability', 'adapt'),
    ('emotional_poise', 'poise'),
    ('clarity_judgment', 'clarity'),
)

WEALTH_BAR_AXES = (
    ('earning_drive', 'earning'),
    ('asset_strategy', 'asset'),
    ('risk_leverage', 'risk'),
    ('money_discipline', 'discipline'),
    ('deal_flow_network', 'dealflow'),
)


@dataclass(frozen=True)
class BarOptions:
    """评分条参数"""
    major_weight: float = 1
    support_weight: float = 0.5
    min_floor: float = 60      # 下限
    neutral_bar: float = 70    # 无信号时的基准值
    floor_mode: str = FLOOR_MODE_HARD

    def __post_init__(self):
        if self.floor_mode not in (FLOOR_MODE_HARD, FLOOR_MODE_RESCALE):
            raise ValueError(f"floor_mode 必须为 hard 或 rescale: {self.floor_mode}")


DEFAULT_BAR_OPTIONS = BarOptions()


def round_half_up(value: float) -> int:
    """四舍五入（.5 向上）"""
    return int(math.floor(value + 0.5))


def build_weighted_list(majors: Iterable[str], supports: Iterable[str] = (),
                        options: BarOptions = DEFAULT_BAR_OPTIONS) -> List[Tuple[str, float]]:
    """主星、辅助星 -> [(星名, 权重)]"""
    stars = [(normalize_star_name(star), options.major_weight) for star in majors]
    stars.extend((normalize_star_name(star), options.support_weight) for star in supports)
    return stars


def aggregate_axes(stars: Iterable[Tuple[str, float]],
                   table: Dict[str, Dict[str, int]]) -> Tuple[Dict[str, float], Dict[str, float]]:
    """
    汇总各维度

    Returns:
        tuple: (sum, cap)，sum 为带符号加权和，cap 为绝对值加权和
    """
    total: Dict[str, float] = {}
    cap: Dict[str, float] = {}
    for star, weight in stars:
        for axis, value in table.get(star, {}).items():
            total[axis] = total.get(axis, 0) + value * weight
            cap[axis] = cap.get(axis, 0) + abs(value) * weight
    return total, cap


def to_bar(total: Optional[float], cap: Optional[float], options: BarOptions = DEFAULT_BAR_OPTIONS) -> int:
    """
    单维度评分

    cap 为 0（无信号）时直接返回 neutral_bar。
    hard: clamp(min_floor, 100, base + neutral_bar - 50)
    rescale: min_floor + (100 - min_floor) * base / 100
    """
    if not cap:
        return round_half_up(options.neutral_bar)
    base = 50 + (total or 0) / cap * 50

    if options.floor_mode == FLOOR_MODE_RESCALE:
        lifted = options.min_floor + (100 - options.min_floor) * (base / 100)
    else:
        lifted = min(100, base + options.neutral_bar - 50)
        lifted = max(options.min_floor, lifted)
    return round_half_up(lifted)


def _compute_bars(table, bar_axes, majors, supports, options) -> Dict[str, int]:
    options = options or DEFAULT_BAR_OPTIONS
    stars = build_weighted_list(majors, supports, options)
    total, cap = aggregate_axes(stars, table)
    return {field: to_bar(total.get(axis), cap.get(axis), options) for field, axis in bar_axes}


def compute_career_bars(majors: Iterable[str], supports: Iterable[str] = (),
                        options: Optional[BarOptions] = None) -> Dict[str, int]:
    """官禄宫执行风格五维"""
    return _compute_bars(CAREER_SCORES, CAREER_BAR_AXES, majors, supports, options)


def compute_life_bars(majors: Iterable[str], supports: Iterable[str] = (),
                      options: Optional[BarOptions] = None) -> Dict[str, int]:
    """命宫性格五维"""
    return _compute_bars(LIFE_SCORES, LIFE_BAR_AXES, majors, supports, options)


def compute_wealth_bars(majors: Iterable[str], supports: Iterable[str] = (),
                        options: Optional[BarOptions] = None) -> Dict[str, int]:
    """财帛宫理财五维"""
    return _compute_bars(WEALTH_SCORES, WEALTH_BAR_AXES, majors, supports, options)


def palace_star_keys(chart, palace_name: str) -> Tuple[List[str], List[str]]:
    """
    取宫位星曜作为评分输入

    主星作为主要星，辅星作为辅助星；星名统一归一为简体（左輔 -> 左辅）。

    Returns:
        tuple: (主要星列表, 辅助星列表)
    """
    palace = chart.palace_by_name(palace_name)
    if palace is None:
        logger.warning(f"命盘中没有宫位: {palace_name}")
        return [], []
    majors = [normalize_star_name(star.name) for star in palace.main_stars]
    supports = [normalize_star_name(star.name) for star in palace.minor_stars]
    return majors, supports


class PalaceBarsAnalyzer:
    """命宫、财帛、官禄三宫评分"""

    @staticmethod
    def analyze(chart, options: Optional[BarOptions] = None) -> Dict[str, Dict[str, int]]:
        """
        Args:
            chart: ChartModel
            options: 评分参数

        Returns:
            dict: {'life': {...}, 'wealth': {...}, 'career': {...}}
        """
        life = compute_life_bars(*palace_star_keys(chart, LIFE_PALACE_NAME), options=options)
        wealth = compute_wealth_bars(*palace_star_keys(chart, WEALTH_PALACE_NAME), options=options)
        career = compute_career_bars(*palace_star_keys(chart, CAREER_PALACE_NAME), options=options)
        logger.debug(f"三宫评分: 命宫 {life}，财帛 {wealth}，官禄 {career}")
        return {'life': life, 'wealth': wealth, 'career': career}
