#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数核心计算模块

提供排盘各步骤的纯函数：
- 干支与宫干
- 命宫定位与宫名
- 五行局
- 紫微、主星、辅星
- 四化、自化、对宫化入
- 大限
- 流年
"""

from .stem_branch import (
    make_pillar,
    year_pillar,
    month_pillar,
    day_pillar,
    hour_pillar,
    polarity,
    assign_palace_stems,
    palace_branches,
)
from .life_palace import (
    locate_life_palace,
    life_palace_number,
    assign_palace_names,
)
from .bureau import (
    resolve_bureau,
    bureau_start_age,
)
from .star_placement import (
    place_ziwei,
    ziwei_palace,
    place_main_stars,
    place_left_right,
    place_wenchang_wenqu,
)
from .transformations import (
    normalize_star_name,
    resolve_transformations,
    find_star,
    apply_birth_year_transformations,
    apply_self_influence,
    apply_opposite_influence,
)
from .major_limit import (
    CLOCKWISE,
    COUNTER_CLOCKWISE,
    limit_direction,
    assign_major_limits,
)
from .annual_flow import (
    year_stem_branch,
    flow_palace,
    map_annual_flow,
    palace_flow_years,
)

__all__ = [
    'make_pillar',
    'year_pillar',
    'month_pillar',
    'day_pillar',
    'hour_pillar',
    'polarity',
    'assign_palace_stems',
    'palace_branches',
    'locate_life_palace',
    'life_palace_number',
    'assign_palace_names',
    'resolve_bureau',
    'bureau_start_age',
    'place_ziwei',
    'ziwei_palace',
    'place_main_stars',
    'place_left_right',
    'place_wenchang_wenqu',
    'normalize_star_name',
    'resolve_transformations',
    'find_star',
    'apply_birth_year_transformations',
    'apply_self_influence',
    'apply_opposite_influence',
    'CLOCKWISE',
    'COUNTER_CLOCKWISE',
    'limit_direction',
    'assign_major_limits',
    'year_stem_branch',
    'flow_palace',
    'map_annual_flow',
    'palace_flow_years',
]
