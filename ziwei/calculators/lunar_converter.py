#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公历 -> 农历转换

基于 lunar_python。年份超出支持范围抛 DateRangeError；
历法库无法转换时返回“未知”占位结果（严格模式下抛 CalendarConversionDegraded）。
"""

import logging
from datetime import date
from typing import Dict, Any, Optional

from lunar_python import Solar

from ziwei.calculators.helpers import lunar_day_string, stem_index, stem_name, branch_index
from ziwei.config import ZiweiConfig, get_config
from ziwei.data.constants import UNKNOWN_MARKER
from ziwei.models.chart import LunarDateModel
from ziwei.utils.exceptions import DateRangeError, InputRangeError, CalendarConversionDegraded

logger = logging.getLogger(__name__)


class LunarConverter:
    """农历转换工具类 - 提供统一的公历转农历方法"""

    @staticmethod
    def _wu_shu_dun(day_stem: str) -> str:
        """五鼠遁日起时法：根据日干推算子时天干"""
        mapping = {
            '甲': '甲', '己': '甲',  # 甲己还加甲
            '乙': '丙', '庚': '丙',  # 乙庚丙作初
            '丙': '戊', '辛': '戊',  # 丙辛从戊起
            '丁': '庚', '壬': '庚',  # 丁壬庚子居
            '戊': '壬', '癸': '壬',  # 戊癸壬子途
        }
        return mapping[day_stem]

    @staticmethod
    def check_range(year: int, min_year: Optional[int] = None, max_year: Optional[int] = None):
        """校验年份是否在支持范围内"""
        config = get_config()
        min_year = config.min_year if min_year is None else min_year
        max_year = config.max_year if max_year is None else max_year
        if not min_year <= year <= max_year:
            raise DateRangeError(year, min_year, max_year)

    @staticmethod
    def _lookup(year: int, month: int, day: int) -> Dict[str, Any]:
        """调用历法库，失败统一转换为 CalendarConversionDegraded"""
        try:
            lunar = Solar.fromYmd(year, month, day).getLunar()
            lunar_month = lunar.getMonth()
            return {
                'year': lunar.getYear(),
                # 闰月在 lunar_python 中以负数表示
                'month': abs(lunar_month),
                'day': lunar.getDay(),
                'is_leap': lunar_month < 0,
                'day_stem': lunar.getDayGan(),
                'day_branch': lunar.getDayZhi(),
            }
        except Exception as e:
            raise CalendarConversionDegraded(year, month, day, str(e)) from e

    @staticmethod
    def solar_to_lunar(year: int, month: int, day: int, strict: bool = False,
                       config: Optional[ZiweiConfig] = None) -> Dict[str, Any]:
        """
        将公历日期转换为农历信息

        Args:
            year: 公历年
            month: 公历月
            day: 公历日
            strict: 为 True 时转换失败直接抛出 CalendarConversionDegraded
            config: 排盘配置，默认全局配置

        Returns:
            dict: lunar_date(LunarDateModel)、day_stem、day_branch（序号，失败时为 None）
        """
        config = config or get_config()
        LunarConverter.check_range(year, config.min_year, config.max_year)
        try:
            date(year, month, day)
        except ValueError:
            raise InputRangeError(f"日期不存在: {year}-{month:02d}-{day:02d}", field="day") from None

        try:
            info = LunarConverter._lookup(year, month, day)
        except CalendarConversionDegraded as e:
            if strict:
                raise
            logger.warning(f"农历转换降级为未知: {e.message}")
            return {
                'lunar_date': LunarDateModel(
                    year=year, month=month, day=0,
                    is_leap=False, is_unknown=True, day_name=UNKNOWN_MARKER,
                ),
                'day_stem': None,
                'day_branch': None,
            }

        lunar_date = LunarDateModel(
            year=info['year'],
            month=info['month'],
            day=info['day'],
            is_leap=info['is_leap'],
            day_name=lunar_day_string(info['day']),
        )
        logger.debug(f"{year}-{month:02d}-{day:02d} -> 农历 {lunar_date.year}年"
                     f"{'闰' if lunar_date.is_leap else ''}{lunar_date.month}月{lunar_date.day_name}")
        return {
            'lunar_date': lunar_date,
            'day_stem': stem_index(info['day_stem']),
            'day_branch': branch_index(info['day_branch']),
        }

    @staticmethod
    def hour_stem(day_stem: str, hour_branch: int) -> str:
        """五鼠遁：由日干和时支序号推算时干"""
        start = stem_index(LunarConverter._wu_shu_dun(day_stem))
        return stem_name(start + hour_branch - 1)


def to_lunar(year: int, month: int, day: int, strict: bool = False,
             config: Optional[ZiweiConfig] = None) -> LunarDateModel:
    """公历 -> 农历日期（见 LunarConverter.solar_to_lunar）"""
    return LunarConverter.solar_to_lunar(year, month, day, strict=strict, config=config)['lunar_date']
