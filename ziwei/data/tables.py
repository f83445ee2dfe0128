#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数查表数据

传统排盘规则不规则，不能用公式推导，全部以常量表形式保存，便于与传统口诀表逐项核对。
"""

from typing import Dict, Tuple

# 五行局 -> 大限起始年龄
BUREAU_START_AGES: Dict[str, int] = {
    '水二局': 2,
    '木三局': 3,
    '金四局': 4,
    '土五局': 5,
    '火六局': 6,
}

BUREAUS = tuple(BUREAU_START_AGES.keys())

# 五虎遁：年干 -> 寅宫（宫位 10）起始天干
PALACE_STEM_START: Dict[str, str] = {
    '甲': '丙', '己': '丙',
    '乙': '戊', '庚': '戊',
    '丙': '庚', '辛': '庚',
    '丁': '壬', '壬': '壬',
    '戊': '甲', '癸': '甲',
}

# 天干起于宫位 10（寅），之后按 11、12、1 ... 9 递增
PALACE_STEM_START_PALACE = 10

# 命宫查表：行 = 月份（1-12），列 = 时支（子..亥）
LIFE_PALACE_TABLE: Tuple[Tuple[str, ...], ...] = (
    ('寅', '丑', '子', '亥', '戌', '酉', '申', '未', '午', '巳', '辰', '卯'),  # 1月
    ('卯', '寅', '丑', '子', '亥', '戌', '酉', '申', '未', '午', '巳', '辰'),  # 2月
    ('辰', '卯', '寅', '丑', '子', '亥', '戌', '酉', '申', '未', '午', '巳'),  # 3月
    ('巳', '辰', '卯', '寅', '丑', '子', '亥', '戌', '酉', '申', '未', '午'),  # 4月
    ('午', '巳', '辰', '卯', '寅', '丑', '子', '亥', '戌', '酉', '申', '未'),  # 5月
    ('未', '午', '巳', '辰', '卯', '寅', '丑', '子', '亥', '戌', '酉', '申'),  # 6月
    ('申', '未', '午', '巳', '辰', '卯', '寅', '丑', '子', '亥', '戌', '酉'),  # 7月
    ('酉', '申', '未', '午', '巳', '辰', '卯', '寅', '丑', '子', '亥', '戌'),  # 8月
    ('戌', '酉', '申', '未', '午', '巳', '辰', '卯', '寅', '丑', '子', '亥'),  # 9月
    ('亥', '戌', '酉', '申', '未', '午', '巳', '辰', '卯', '寅', '丑', '子'),  # 10月
    ('子', '亥', '戌', '酉', '申', '未', '午', '巳', '辰', '卯', '寅', '丑'),  # 11月
    ('丑', '子', '亥', '戌', '酉', '申', '未', '午', '巳', '辰', '卯', '寅'),  # 12月
)

# 五行局：命宫天干 x 命宫地支（每个天干只有六个地支有值）
FIVE_ELEMENTS_TABLE: Dict[str, Dict[str, str]] = {
    '甲': {'子': '金四局', '寅': '水二局', '辰': '火六局', '午': '金四局', '申': '水二局', '戌': '火六局'},
    '乙': {'丑': '金四局', '卯': '水二局', '巳': '火六局', '未': '金四局', '酉': '水二局', '亥': '火六局'},
    '丙': {'子': '水二局', '寅': '火六局', '辰': '土五局', '午': '水二局', '申': '火六局', '戌': '土五局'},
    '丁': {'丑': '水二局', '卯': '火六局', '巳': '土五局', '未': '水二局', '酉': '火六局', '亥': '土五局'},
    '戊': {'子': '火六局', '寅': '土五局', '辰': '木三局', '午': '火六局', '申': '土五局', '戌': '木三局'},
    '己': {'丑': '火六局', '卯': '土五局', '巳': '木三局', '未': '火六局', '酉': '土五局', '亥': '木三局'},
    '庚': {'子': '土五局', '寅': '木三局', '辰': '金四局', '午': '土五局', '申': '木三局', '戌': '金四局'},
    '辛': {'丑': '土五局', '卯': '木三局', '巳': '金四局', '未': '土五局', '酉': '木三局', '亥': '金四局'},
    '壬': {'子': '木三局', '寅': '金四局', '辰': '水二局', '午': '木三局', '申': '金四局', '戌': '水二局'},
    '癸': {'丑': '木三局', '卯': '金四局', '巳': '水二局', '未': '木三局', '酉': '金四局', '亥': '水二局'},
}

# 紫微星位置：农历日 x 五行局 -> 地支
ZIWEI_POSITIONS: Dict[str, Dict[str, str]] = {
    '初一': {'水二局': '丑', '木三局': '辰', '金四局': '亥', '土五局': '午', '火六局': '酉'},
    '初二': {'水二局': '寅', '木三局': '丑', '金四局': '辰', '土五局': '亥', '火六局': '午'},
    '初三': {'水二局': '寅', '木三局': '寅', '金四局': '丑', '土五局': '辰', '火六局': '亥'},
    '初四': {'水二局': '卯', '木三局': '巳', '金四局': '寅', '土五局': '丑', '火六局': '辰'},
    '初五': {'水二局': '卯', '木三局': '寅', '金四局': '子', '土五局': '寅', '火六局': '丑'},
    '初六': {'水二局': '辰', '木三局': '卯', '金四局': '巳', '土五局': '未', '火六局': '寅'},
    '初七': {'水二局': '辰', '木三局': '午', '金四局': '寅', '土五局': '子', '火六局': '戌'},
    '初八': {'水二局': '巳', '木三局': '卯', '金四局': '卯', '土五局': '巳', '火六局': '未'},
    '初九': {'水二局': '巳', '木三局': '辰', '金四局': '丑', '土五局': '寅', '火六局': '子'},
    '初十': {'水二局': '午', '木三局': '未', '金四局': '午', '土五局': '卯', '火六局': '巳'},
    '十一': {'水二局': '午', '木三局': '辰', '金四局': '卯', '土五局': '申', '火六局': '寅'},
    '十二': {'水二局': '未', '木三局': '巳', '金四局': '辰', '土五局': '丑', '火六局': '卯'},
    '十三': {'水二局': '未', '木三局': '申', '金四局': '寅', '土五局': '午', '火六局': '亥'},
    '十四': {'水二局': '申', '木三局': '巳', '金四局': '未', '土五局': '卯', '火六局': '申'},
    '十五': {'水二局': '申', '木三局': '午', '金四局': '辰', '土五局': '辰', '火六局': '丑'},
    '十六': {'水二局': '酉', '木三局': '酉', '金四局': '巳', '土五局': '酉', '火六局': '午'},
    '十七': {'水二局': '酉', '木三局': '午', '金四局': '卯', '土五局': '寅', '火六局': '卯'},
    '十八': {'水二局': '戌', '木三局': '未', '金四局': '申', '土五局': '未', '火六局': '辰'},
    '十九': {'水二局': '戌', '木三局': '戌', '金四局': '巳', '土五局': '辰', '火六局': '子'},
    '二十': {'水二局': '亥', '木三局': '未', '金四局': '午', '土五局': '巳', '火六局': '酉'},
    '廿一': {'水二局': '亥', '木三局': '申', '金四局': '辰', '土五局': '戌', '火六局': '寅'},
    '廿二': {'水二局': '子', '木三局': '亥', '金四局': '酉', '土五局': '卯', '火六局': '未'},
    '廿三': {'水二局': '子', '木三局': '申', '金四局': '午', '土五局': '申', '火六局': '辰'},
    '廿四': {'水二局': '丑', '木三局': '酉', '金四局': '未', '土五局': '巳', '火六局': '巳'},
    '廿五': {'水二局': '丑', '木三局': '子', '金四局': '巳', '土五局': '午', '火六局': '丑'},
    '廿六': {'水二局': '寅', '木三局': '酉', '金四局': '戌', '土五局': '亥', '火六局': '戌'},
    '廿七': {'水二局': '寅', '木三局': '戌', '金四局': '未', '土五局': '辰', '火六局': '卯'},
    '廿八': {'水二局': '卯', '木三局': '丑', '金四局': '申', '土五局': '酉', '火六局': '申'},
    '廿九': {'水二局': '卯', '木三局': '戌', '金四局': '午', '土五局': '午', '火六局': '巳'},
    '三十': {'水二局': '辰', '木三局': '亥', '金四局': '亥', '土五局': '未', '火六局': '午'},
}

# 十四主星：紫微所在地支 -> {宫位地支: 主星}，紫微在本宫时排在第一位
MAIN_STARS_TABLE: Dict[str, Dict[str, Tuple[str, ...]]] = {
    '子': {
        '子': ('紫微',), '丑': (), '寅': ('破军',), '卯': (),
        '辰': ('天府', '廉贞'), '巳': ('太阴',), '午': ('贪狼',), '未': ('巨门', '天同'),
        '申': ('天相', '武曲'), '酉': ('天梁', '太阳'), '戌': ('七杀',), '亥': ('天机',),
    },
    '丑': {
        '子': ('天机',), '丑': ('紫微', '破军'), '寅': (), '卯': ('天府',),
        '辰': ('太阴',), '巳': ('贪狼', '廉贞'), '午': ('巨门',), '未': ('天相',),
        '申': ('天梁', '天同'), '酉': ('七杀', '武曲'), '戌': ('太阳',), '亥': (),
    },
    '寅': {
        '子': ('破军',), '丑': ('天机',), '寅': ('紫微', '天府'), '卯': ('太阴',),
        '辰': ('贪狼',), '巳': ('巨门',), '午': ('天相', '廉贞'), '未': ('天梁',),
        '申': ('七杀',), '酉': ('天同',), '戌': ('武曲',), '亥': ('太阳',),
    },
    '卯': {
        '子': ('太阳',), '丑': ('天府',), '寅': ('太阴', '天机'), '卯': ('紫微', '贪狼'),
        '辰': ('巨门',), '巳': ('天相',), '午': ('天梁',), '未': ('七杀', '廉贞'),
        '申': (), '酉': (), '戌': ('天同',), '亥': ('破军', '武曲'),
    },
    '辰': {
        '子': ('天府', '武曲'), '丑': ('太阴', '太阳'), '寅': ('贪狼',), '卯': ('巨门', '天机'),
        '辰': ('紫微', '天相'), '巳': ('天梁',), '午': ('七杀',), '未': (),
        '申': ('廉贞',), '酉': (), '戌': ('破军',), '亥': ('天同',),
    },
    '巳': {
        '子': ('太阴', '天同'), '丑': ('贪狼', '武曲'), '寅': ('巨门', '太阳'), '卯': ('天相',),
        '辰': ('天梁', '天机'), '巳': ('紫微', '七杀'), '午': (), '未': (),
        '申': (), '酉': ('破军', '廉贞'), '戌': (), '亥': ('天府',),
    },
    '午': {
        '子': ('贪狼',), '丑': ('巨门', '天同'), '寅': ('天相', '武曲'), '卯': ('天梁', '太阳'),
        '辰': ('七杀',), '巳': ('天机',), '午': ('紫微',), '未': (),
        '申': ('破军',), '酉': (), '戌': ('天府', '廉贞'), '亥': ('太阴',),
    },
    '未': {
        '子': ('巨门',), '丑': ('天相',), '寅': ('天梁', '天同'), '卯': ('七杀', '武曲'),
        '辰': ('太阳',), '巳': (), '午': ('天机',), '未': ('紫微', '破军'),
        '申': (), '酉': ('天府',), '戌': ('太阴',), '亥': ('贪狼', '廉贞'),
    },
    '申': {
        '子': ('天相', '廉贞'), '丑': ('天梁',), '寅': ('七杀',), '卯': ('天同',),
        '辰': ('武曲',), '巳': ('太阳',), '午': ('破军',), '未': ('天机',),
        '申': ('紫微', '天府'), '酉': ('太阴',), '戌': ('贪狼',), '亥': ('巨门',),
    },
    '酉': {
        '子': ('天梁',), '丑': ('七杀', '廉贞'), '寅': (), '卯': (),
        '辰': ('天同',), '巳': ('破军', '武曲'), '午': ('太阳',), '未': ('天府',),
        '申': ('太阴', '天机'), '酉': ('紫微', '贪狼'), '戌': ('巨门',), '亥': ('天相',),
    },
    '戌': {
        '子': ('七杀',), '丑': (), '寅': ('廉贞',), '卯': (),
        '辰': ('破军',), '巳': ('天同',), '午': ('天府', '武曲'), '未': ('太阴', '太阳'),
        '申': ('贪狼',), '酉': ('巨门', '天机'), '戌': ('紫微', '天相'), '亥': ('天梁',),
    },
    '亥': {
        '子': (), '丑': (), '寅': (), '卯': ('破军', '廉贞'),
        '辰': (), '巳': ('天府',), '午': ('太阴', '天同'), '未': ('贪狼', '武曲'),
        '申': ('巨门', '太阳'), '酉': ('天相',), '戌': ('天梁', '天机'), '亥': ('紫微', '七杀'),
    },
}

# 左輔：生月 -> 地支
LEFT_SUPPORT_POSITIONS: Dict[int, str] = {
    1: '辰', 2: '巳', 3: '午', 4: '未', 5: '申', 6: '酉',
    7: '戌', 8: '亥', 9: '子', 10: '丑', 11: '寅', 12: '卯',
}

# 右弼：生月 -> 地支
RIGHT_SUPPORT_POSITIONS: Dict[int, str] = {
    1: '戌', 2: '酉', 3: '申', 4: '未', 5: '午', 6: '巳',
    7: '辰', 8: '卯', 9: '寅', 10: '丑', 11: '子', 12: '亥',
}

# 文昌：时支 -> 地支
WEN_CHANG_POSITIONS: Dict[str, str] = {
    '子': '戌', '丑': '酉', '寅': '申', '卯': '未', '辰': '午', '巳': '巳',
    '午': '辰', '未': '卯', '申': '寅', '酉': '丑', '戌': '子', '亥': '亥',
}

# 文曲：时支 -> 地支
WEN_QU_POSITIONS: Dict[str, str] = {
    '子': '辰', '丑': '巳', '寅': '午', '卯': '未', '辰': '申', '巳': '酉',
    '午': '戌', '未': '亥', '申': '子', '酉': '丑', '戌': '寅', '亥': '卯',
}

# 四化：天干 -> {祿, 權, 科, 忌}
FOUR_TRANSFORMATIONS: Dict[str, Dict[str, str]] = {
    '甲': {'祿': '廉贞', '權': '破军', '科': '武曲', '忌': '太阳'},
    '乙': {'祿': '天机', '權': '天梁', '科': '紫微', '忌': '太阴'},
    '丙': {'祿': '天同', '權': '天机', '科': '文昌', '忌': '廉贞'},
    '丁': {'祿': '太阴', '權': '天同', '科': '天机', '忌': '巨门'},
    '戊': {'祿': '贪狼', '權': '太阴', '科': '右弼', '忌': '天机'},
    '己': {'祿': '武曲', '權': '贪狼', '科': '天梁', '忌': '文曲'},
    '庚': {'祿': '太阳', '權': '武曲', '科': '太阴', '忌': '天同'},
    '辛': {'祿': '巨门', '權': '太阳', '科': '文曲', '忌': '文昌'},
    '壬': {'祿': '天梁', '權': '紫微', '科': '左輔', '忌': '武曲'},
    '癸': {'祿': '破军', '權': '巨门', '科': '太阴', '忌': '贪狼'},
}

# 对宫
OPPOSITE_PALACE_NAMES: Dict[str, str] = {
    '命宫': '迁移',
    '迁移': '命宫',
    '父母': '疾厄',
    '疾厄': '父母',
    '福德': '财帛',
    '财帛': '福德',
    '田宅': '子女',
    '子女': '田宅',
    '官禄': '夫妻',
    '夫妻': '官禄',
    '交友': '兄弟',
    '兄弟': '交友',
}
