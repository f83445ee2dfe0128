#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘服务层
负责校验出生信息、调用排盘逻辑、读写缓存并组装响应
"""

import logging
from datetime import datetime
from typing import Dict, Any, Optional, Union

from pydantic import ValidationError

from ziwei.analyzers import (
    PalaceBarsAnalyzer,
    BarOptions,
    classify_execution,
    classify_wealth_codes,
    explain_wealth_code_votes,
    palace_star_keys,
)
from ziwei.calculators.ziwei_calculator import ZiweiCalculator, with_annual_flow
from ziwei.calculators.ziwei_logging import setup_logging
from ziwei.config import get_config
from ziwei.data.constants import CAREER_PALACE_NAME, WEALTH_PALACE_NAME
from ziwei.models import BirthInput, ChartModel
from ziwei.utils.cache import get_chart_cache
from ziwei.utils.exceptions import ZiweiError

logger = logging.getLogger(__name__)


class ChartService:
    """紫微排盘服务类"""

    @staticmethod
    def get_chart(birth: Union[BirthInput, Dict[str, Any]], target_year: Optional[int] = None,
                  use_cache: bool = True) -> ChartModel:
        """
        获取命盘（优先读缓存）

        缓存中的命盘不可变；姓名或流年年份不同时返回替换后的副本。

        Args:
            birth: 出生信息
            target_year: 流年年份，默认当前年份
            use_cache: 是否使用缓存

        Returns:
            ChartModel: 命盘
        """
        if not isinstance(birth, BirthInput):
            birth = BirthInput.model_validate(birth)
        if target_year is None:
            target_year = datetime.now().year

        cache = get_chart_cache()
        if use_cache:
            cached = cache.get(birth.year, birth.month, birth.day, birth.hour, birth.gender)
            if cached is not None:
                logger.debug(f"命盘缓存命中: {birth.year}-{birth.month:02d}-{birth.day:02d} {birth.hour}时")
                chart = cached
                if chart.input != birth:
                    chart = chart.model_copy(update={'input': birth})
                if chart.annual_flow.year != target_year:
                    chart = with_annual_flow(chart, target_year)
                return chart

        chart = ZiweiCalculator(birth, config=get_config()).calculate(target_year)
        if use_cache:
            cache.set(birth.year, birth.month, birth.day, birth.hour, birth.gender, chart)
        return chart

    @staticmethod
    def calculate_chart(payload: Union[BirthInput, Dict[str, Any]],
                        target_year: Optional[int] = None) -> Dict[str, Any]:
        """
        排盘接口

        Args:
            payload: 出生信息（dict 或 BirthInput）
            target_year: 流年年份

        Returns:
            dict: {'success', 'data', 'error', 'timestamp'}
        """
        setup_logging(get_config().log_level)
        timestamp = datetime.now().isoformat()
        try:
            chart = ChartService.get_chart(payload, target_year=target_year)
        except ValidationError as e:
            logger.warning(f"出生信息校验失败: {e.errors()}")
            return {
                'success': False,
                'data': None,
                'error': f"参数错误: {e.errors()[0].get('msg', str(e))}",
                'timestamp': timestamp,
            }
        except ZiweiError as e:
            log = logger.error if e.code >= 500 else logger.warning
            log(f"排盘失败 [{e.error_type}]: {e.message}")
            return {
                'success': False,
                'data': None,
                'error': e.message,
                'timestamp': timestamp,
            }

        logger.info(f"排盘成功: 命宫宫位 {chart.life_palace}，{chart.five_elements}")
        return {
            'success': True,
            'data': chart.model_dump(),
            'error': None,
            'timestamp': timestamp,
        }

    @staticmethod
    def analyze_chart(chart: ChartModel, options: Optional[BarOptions] = None,
                      wealth_code_limit: Optional[int] = None) -> Dict[str, Any]:
        """
        命盘评分汇总：三宫五维、执行风格、财富密码

        执行风格取官禄宫星曜，财富密码取财帛宫星曜（主星与辅星一并计票）。
        """
        career_majors, career_supports = palace_star_keys(chart, CAREER_PALACE_NAME)
        wealth_majors, wealth_supports = palace_star_keys(chart, WEALTH_PALACE_NAME)
        wealth_stars = wealth_majors + wealth_supports

        return {
            'bars': PalaceBarsAnalyzer.analyze(chart, options),
            'execution_style': classify_execution(career_majors + career_supports),
            'wealth_codes': classify_wealth_codes(wealth_stars, limit=wealth_code_limit),
            'wealth_code_votes': explain_wealth_code_votes(wealth_stars),
        }
