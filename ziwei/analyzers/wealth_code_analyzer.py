#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
财富密码分析器

每颗星投票给一个或多个财富密码，按票数排序；票数相同按默认优先级
（Strategy Planner > Investment Brain > Branding Magnet > Collaborator）或字母序。
未知星名忽略。
"""

from typing import Dict, List, Any, Iterable, Optional

from ziwei.calculators.ziwei_core import normalize_star_name

STRATEGY_PLANNER = 'Strategy Planner'
INVESTMENT_BRAIN = 'Investment Brain'
BRANDING_MAGNET = 'Branding Magnet'
COLLABORATOR = 'Collaborator'

DEFAULT_PRIORITY = (STRATEGY_PLANNER, INVESTMENT_BRAIN, BRANDING_MAGNET, COLLABORATOR)

TIE_BREAK_PRIORITY = 'priority'
TIE_BREAK_ALPHA = 'alpha'

STAR_TO_WEALTH_CODES: Dict[str, tuple] = {
    # 统筹、治理
    '紫微': (STRATEGY_PLANNER,),
    '天府': (INVESTMENT_BRAIN, STRATEGY_PLANNER),
    '天梁': (STRATEGY_PLANNER, INVESTMENT_BRAIN),
    '天相': (COLLABORATOR, STRATEGY_PLANNER),
    '天机': (STRATEGY_PLANNER, INVESTMENT_BRAIN),
    '武曲': (INVESTMENT_BRAIN, STRATEGY_PLANNER),
    '廉贞': (STRATEGY_PLANNER,),
    # 变革、决断
    '破军': (INVESTMENT_BRAIN,),
    '七杀': (INVESTMENT_BRAIN,),
    # 品牌、表达
    '太阳': (BRANDING_MAGNET,),
    '贪狼': (BRANDING_MAGNET,),
    '文曲': (BRANDING_MAGNET,),
    '文昌': (BRANDING_MAGNET, INVESTMENT_BRAIN),
    '巨门': (BRANDING_MAGNET, INVESTMENT_BRAIN),
    # 服务、协作
    '天同': (COLLABORATOR,),
    '左辅': (COLLABORATOR, STRATEGY_PLANNER),
    '右弼': (COLLABORATOR,),
    '太阴': (COLLABORATOR,),
}


def _sort_key(tie_break: str):
    if tie_break == TIE_BREAK_ALPHA:
        return lambda item: (-item[1], item[0])
    return lambda item: (-item[1], DEFAULT_PRIORITY.index(item[0]))


def classify_wealth_codes(stars: Iterable[str], limit: Optional[int] = None,
                          tie_break: str = TIE_BREAK_PRIORITY) -> List[str]:
    """
    星曜 -> 财富密码

    Args:
        stars: 星名列表（繁简均可，重复星重复计票）
        limit: 最多返回条数
        tie_break: priority 或 alpha

    Returns:
        list: 按票数降序的财富密码，零票不返回
    """
    if tie_break not in (TIE_BREAK_PRIORITY, TIE_BREAK_ALPHA):
        raise ValueError(f"tie_break 必须为 priority 或 alpha: {tie_break}")

    counts = {code: 0 for code in DEFAULT_PRIORITY}
    for star in stars:
        for code in STAR_TO_WEALTH_CODES.get(normalize_star_name(star), ()):
            counts[code] += 1

    ranked = sorted(counts.items(), key=_sort_key(tie_break))
    result = [code for code, votes in ranked if votes > 0]
    if limit and limit > 0:
        result = result[:limit]
    return result


def explain_wealth_code_votes(stars: Iterable[str]) -> List[Dict[str, Any]]:
    """
    说明各财富密码由哪些星触发

    Returns:
        list: [{'code', 'weight', 'triggers'}]，weight 为不同触发星的数量
    """
    triggers = {code: [] for code in DEFAULT_PRIORITY}
    for star in stars:
        name = normalize_star_name(star)
        for code in STAR_TO_WEALTH_CODES.get(name, ()):
            if name not in triggers[code]:
                triggers[code].append(name)

    explained = [
        {'code': code, 'weight': len(names), 'triggers': names}
        for code, names in triggers.items()
    ]
    explained.sort(key=lambda item: (-item['weight'], DEFAULT_PRIORITY.index(item['code'])))
    return [item for item in explained if item['weight'] > 0]
