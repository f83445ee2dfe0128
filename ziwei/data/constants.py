#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数基础常量

天干、地支、宫位名称、农历日名称、四化标签等基础数据。
所有序号均为 1 起始（天干 1-10，地支 1-12，宫位 1-12）。
"""

from typing import Dict

# 天干
HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

# 地支
EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 十二宫名称（从命宫起）
PALACE_NAMES = (
    '命宫', '兄弟', '夫妻', '子女', '财帛', '疾厄',
    '迁移', '交友', '官禄', '田宅', '福德', '父母',
)

LIFE_PALACE_NAME = '命宫'
WEALTH_PALACE_NAME = '财帛'
CAREER_PALACE_NAME = '官禄'

# 宫位 1 固定落在巳，顺时针依次为午、未……辰
PALACE_ONE_BRANCH_INDEX = 5

# 十四主星
MAIN_STARS = (
    '紫微', '天机', '太阳', '武曲', '天同', '廉贞', '天府',
    '太阴', '贪狼', '巨门', '天相', '天梁', '七杀', '破军',
)

# 辅星
LEFT_SUPPORT = '左輔'
RIGHT_SUPPORT = '右弼'
WEN_CHANG = '文昌'
WEN_QU = '文曲'

# 四化
TRANSFORMATION_KEYS = ('祿', '權', '科', '忌')
TRANSFORMATION_TAGS = {
    '祿': '化祿',
    '權': '化權',
    '科': '化科',
    '忌': '化忌',
}

# 阴阳
YANG = 'Yang'
YIN = 'Yin'

GENDERS = ('male', 'female')

# 农历日名称
LUNAR_DAY_NAMES = (
    '初一', '初二', '初三', '初四', '初五', '初六', '初七', '初八', '初九', '初十',
    '十一', '十二', '十三', '十四', '十五', '十六', '十七', '十八', '十九', '二十',
    '廿一', '廿二', '廿三', '廿四', '廿五', '廿六', '廿七', '廿八', '廿九', '三十',
)

UNKNOWN_MARKER = '未知'

# 繁体 -> 简体（星名、宫名匹配用）
TRADITIONAL_TO_SIMPLIFIED: Dict[str, str] = {
    '機': '机',
    '陽': '阳',
    '貞': '贞',
    '陰': '阴',
    '貪': '贪',
    '門': '门',
    '殺': '杀',
    '軍': '军',
    '輔': '辅',
    '薇': '微',
    '宮': '宫',
    '遷': '迁',
    '財': '财',
    '祿': '禄',
    '權': '权',
    '樑': '梁',
}
