#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四化计算模块

提供：
- 生年四化（年干）
- 自化（本宫宫干化本宫星）
- 对宫化入（对宫宫干化本宫星）

星名匹配三级：精确 -> 繁简归一后精确 -> 归一后子串。
后两级命中视为数据质量信号，记录日志；全部未命中抛 StarResolutionAmbiguity，
由各注释步骤按条目捕获，不影响整盘。
"""

import logging
from functools import lru_cache
from typing import Dict, Any, List, Iterator, Tuple, Optional

from ziwei.data.constants import TRADITIONAL_TO_SIMPLIFIED, TRANSFORMATION_TAGS
from ziwei.data.tables import FOUR_TRANSFORMATIONS, OPPOSITE_PALACE_NAMES
from ziwei.utils.exceptions import LookupMissError, StarResolutionAmbiguity

logger = logging.getLogger(__name__)


@lru_cache(maxsize=512)
def normalize_star_name(name: str) -> str:
    """繁体 -> 简体归一（星名、宫名通用），结果按名缓存"""
    return ''.join(TRADITIONAL_TO_SIMPLIFIED.get(ch, ch) for ch in (name or '')).strip()


def resolve_transformations(stem: str) -> Dict[str, str]:
    """
    天干 -> 四化星

    Args:
        stem: 天干

    Returns:
        dict: {'祿': 星名, '權': 星名, '科': 星名, '忌': 星名}
    """
    entry = FOUR_TRANSFORMATIONS.get(stem)
    if entry is None:
        raise LookupMissError(f"四化表缺少天干: {stem}", table="FOUR_TRANSFORMATIONS")
    return dict(entry)


def iter_stars(palaces: List[Dict[str, Any]]) -> Iterator[Tuple[Dict[str, Any], int]]:
    """依次遍历各宫主星、辅星，产出 (星, 宫位)"""
    for palace in palaces:
        for star in palace.get('main_stars', []):
            yield star, palace['number']
        for star in palace.get('minor_stars', []):
            yield star, palace['number']


def star_key(star: Dict[str, Any]) -> str:
    """星曜归一名：优先取建星时写入的 key"""
    return star.get('key') or normalize_star_name(star['name'])


def find_star(palaces: List[Dict[str, Any]], name: str, quiet: bool = False) -> Tuple[Dict[str, Any], int]:
    """
    在给定宫位中查找星曜

    Args:
        palaces: 宫位列表（可只传单个宫位）
        name: 目标星名
        quiet: 为 True 时降级命中只记 debug

    Returns:
        tuple: (星, 宫位序号)

    Raises:
        StarResolutionAmbiguity: 三级匹配均未命中
    """
    stars = list(iter_stars(palaces))

    for star, number in stars:
        if star['name'] == name:
            return star, number

    log = logger.debug if quiet else logger.warning
    target = normalize_star_name(name)
    keyed = [(star, number, star_key(star)) for star, number in stars]
    for star, number, key in keyed:
        if key == target:
            log(f"星名繁简归一后命中: {name} -> {star['name']} (宫位 {number})")
            return star, number

    if target:
        for star, number, key in keyed:
            if target in key:
                log(f"星名子串匹配命中: {name} -> {star['name']} (宫位 {number})")
                return star, number

    raise StarResolutionAmbiguity(name)


def apply_birth_year_transformations(palaces: List[Dict[str, Any]], year_stem: str) -> Dict[str, Optional[str]]:
    """
    生年四化：在命盘中找到对应星曜并追加化祿/化權/化科/化忌

    Returns:
        dict: {'祿': 星名或 None, ...}，未找到的星记日志后为 None
    """
    resolved = {}
    for key, target in resolve_transformations(year_stem).items():
        tag = TRANSFORMATION_TAGS[key]
        try:
            star, number = find_star(palaces, target)
        except StarResolutionAmbiguity as e:
            logger.warning(f"生年{tag}未落宫，已跳过: {e.message}")
            resolved[key] = None
            continue
        star['transformations'].append(tag)
        resolved[key] = star['name']
        logger.debug(f"生年{tag} -> {star['name']} (宫位 {number})")
    return resolved


def apply_self_influence(palaces: List[Dict[str, Any]]) -> int:
    """
    自化：以各宫宫干查四化，星在本宫则记为自化

    Returns:
        int: 自化条目数
    """
    count = 0
    for palace in palaces:
        for key, target in resolve_transformations(palace['heavenly_stem']).items():
            try:
                star, _ = find_star([palace], target, quiet=True)
            except StarResolutionAmbiguity:
                continue
            star['self_influence'].append(TRANSFORMATION_TAGS[key])
            count += 1
            logger.debug(f"宫位 {palace['number']} {star['name']} 自{TRANSFORMATION_TAGS[key]}")
    return count


def apply_opposite_influence(palaces: List[Dict[str, Any]]) -> int:
    """
    对宫化入：以对宫宫干查四化，星在本宫则在本宫记录来源宫位

    对宫按宫名配对：命宫-迁移、父母-疾厄、福德-财帛、田宅-子女、官禄-夫妻、交友-兄弟。

    Returns:
        int: 对宫化入条目数
    """
    by_name = {palace['name']: palace for palace in palaces}
    count = 0
    for palace in palaces:
        opposite_name = OPPOSITE_PALACE_NAMES.get(palace['name'])
        source = by_name.get(opposite_name)
        if source is None:
            raise LookupMissError(f"找不到 {palace['name']} 的对宫", table="OPPOSITE_PALACE_NAMES")

        for key, target in resolve_transformations(source['heavenly_stem']).items():
            try:
                star, _ = find_star([palace], target, quiet=True)
            except StarResolutionAmbiguity:
                continue
            palace['opposite_palace_influence'].append({
                'star_name': star['name'],
                'transformation': TRANSFORMATION_TAGS[key],
                'source_palace': source['number'],
            })
            count += 1
    return count
