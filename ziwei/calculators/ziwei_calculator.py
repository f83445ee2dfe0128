#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘主模块 - ZiweiCalculator 类

排盘流程严格按序执行，每一步只读取前一步的结果：
农历转换 -> 干支 -> 命宫与宫名 -> 五行局 -> 紫微 -> 主星 -> 辅星
-> 四化/自化/对宫化入 -> 大限 -> 流年
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, Union

from ziwei.calculators.helpers import hour_to_branch, palace_branch, branch_to_palace
from ziwei.calculators.lunar_converter import LunarConverter
from ziwei.calculators.ziwei_core import (
    year_pillar,
    month_pillar,
    day_pillar,
    hour_pillar,
    polarity,
    assign_palace_stems,
    locate_life_palace,
    assign_palace_names,
    resolve_bureau,
    place_ziwei,
    place_main_stars,
    place_left_right,
    place_wenchang_wenqu,
    normalize_star_name,
    apply_birth_year_transformations,
    apply_self_influence,
    apply_opposite_influence,
    assign_major_limits,
    limit_direction,
    CLOCKWISE,
    map_annual_flow,
    palace_flow_years,
)
from ziwei.config import ZiweiConfig, MONTH_BASIS_LUNAR, get_config
from ziwei.data.constants import (
    LEFT_SUPPORT,
    RIGHT_SUPPORT,
    WEN_CHANG,
    WEN_QU,
    TRANSFORMATION_TAGS,
)
from ziwei.models import (
    BirthInput,
    ChartModel,
    AnnualFlowModel,
    SelectedAnnualFlowModel,
)
from ziwei.utils.exceptions import LookupMissError

logger = logging.getLogger(__name__)


class ZiweiCalculator:
    """紫微斗数排盘主类"""

    def __init__(self, birth_input: Union[BirthInput, Dict[str, Any]],
                 config: Optional[ZiweiConfig] = None, strict: bool = False):
        """
        Args:
            birth_input: 出生信息（BirthInput 或同结构的 dict）
            config: 排盘配置，默认全局配置
            strict: 农历转换失败时是否直接抛错
        """
        if not isinstance(birth_input, BirthInput):
            birth_input = BirthInput.model_validate(birth_input)
        self.birth_input = birth_input
        self.config = config or get_config()
        self.strict = strict

        self.lunar_date = None
        self._day_stem = None
        self._day_branch = None
        self._ziwei_branch = None
        self.pillars: Dict[str, Dict[str, Any]] = {}
        self.yin_yang = None
        self.palaces: List[Dict[str, Any]] = []
        self.life_palace = None
        self.five_elements = None
        self.ziwei_position = None
        self.transformations: Dict[str, Optional[str]] = {}
        self.annual_flow: Dict[str, Any] = {}
        self.calculation_steps: Dict[str, str] = {}
        self.last_result: Optional[ChartModel] = None

    def calculate(self, target_year: Optional[int] = None) -> ChartModel:
        """
        执行排盘

        Args:
            target_year: 流年目标年份，默认当前年份

        Returns:
            ChartModel: 不可变命盘
        """
        if target_year is None:
            target_year = datetime.now().year
        birth = self.birth_input
        logger.info(f"开始排盘: {birth.year}-{birth.month:02d}-{birth.day:02d} {birth.hour}时 {birth.gender}")

        # 1. 农历转换
        self._calculate_lunar()

        # 2. 年月日时干支、阴阳
        self._calculate_pillars()

        # 3. 十二宫地支、宫干
        self._init_palaces()

        # 4. 命宫与宫名
        self._calculate_life_palace()

        # 5. 五行局
        self._calculate_five_elements()

        # 6. 紫微与十四主星
        self._place_ziwei()
        self._place_main_stars()

        # 7. 辅星
        self._place_support_stars()

        # 8. 四化、自化、对宫化入
        self._calculate_transformations()
        self._calculate_self_influence()
        self._calculate_opposite_influence()

        # 9. 大限
        self._calculate_major_limits()

        # 10. 流年
        self._calculate_annual_flow(target_year)

        result = self._format_result()
        self.last_result = result
        logger.info(f"排盘完成: 命宫宫位 {self.life_palace}，{self.five_elements}，紫微宫位 {self.ziwei_position}")
        return result

    # ------------------------------------------------------------------

    def _calculate_lunar(self):
        birth = self.birth_input
        converted = LunarConverter.solar_to_lunar(
            birth.year, birth.month, birth.day, strict=self.strict, config=self.config
        )
        self.lunar_date = converted['lunar_date']
        self._day_stem = converted['day_stem']
        self._day_branch = converted['day_branch']
        if self.lunar_date.is_unknown:
            raise LookupMissError(
                f"农历日期未知，无法安紫微: {birth.year}-{birth.month:02d}-{birth.day:02d}",
                table="ZIWEI_POSITIONS",
            )
        lunar = self.lunar_date
        self.calculation_steps['step1'] = (
            f"农历: {lunar.year}年{'闰' if lunar.is_leap else ''}{lunar.month}月{lunar.day_name}"
        )

    def _calculate_pillars(self):
        birth = self.birth_input
        year = year_pillar(self.lunar_date.year)
        self.pillars = {
            'year': year,
            'month': month_pillar(year['stem_name'], birth.month),
            'day': day_pillar(self._day_stem, self._day_branch),
        }
        self.pillars['hour'] = hour_pillar(self.pillars['day']['stem_name'], birth.hour)
        self.yin_yang = polarity(year['branch'])
        self.calculation_steps['step2'] = (
            f"四柱: {self._pillar_text('year')} {self._pillar_text('month')} "
            f"{self._pillar_text('day')} {self._pillar_text('hour')}，"
            f"年干 {year['stem_name']}（{year['stem']}），年支 {year['branch_name']}（{year['branch']}），{self.yin_yang}"
        )

    def _pillar_text(self, key: str) -> str:
        pillar = self.pillars[key]
        return f"{pillar['stem_name']}{pillar['branch_name']}"

    def _init_palaces(self):
        year_stem = self.pillars['year']['stem_name']
        stems = assign_palace_stems(year_stem)
        self.palaces = [
            {
                'number': number,
                'earthly_branch': palace_branch(number),
                'heavenly_stem': stems[number],
                'name': '',
                'main_stars': [],
                'minor_stars': [],
                'major_limit': None,
                'annual_flow': None,
                'opposite_palace_influence': [],
            }
            for number in range(1, 13)
        ]
        self.calculation_steps['step3'] = f"宫干: 宫位 10（寅）起 {stems[10]}，依次排布十二宫"

    def _palace(self, number: int) -> Dict[str, Any]:
        return self.palaces[number - 1]

    def _basis_month(self) -> int:
        """命宫、左輔右弼取月"""
        if self.config.month_basis == MONTH_BASIS_LUNAR:
            return self.lunar_date.month
        return self.birth_input.month

    def _calculate_life_palace(self):
        month = self._basis_month()
        hour_branch = hour_to_branch(self.birth_input.hour)
        branch = locate_life_palace(month, hour_branch)
        self.life_palace = branch_to_palace(branch)
        for number, name in assign_palace_names(self.life_palace).items():
            self._palace(number)['name'] = name
        self.calculation_steps['step4'] = (
            f"命宫: {self.config.month_basis} 月 {month}，时支 {self.pillars['hour']['branch_name']}，"
            f"落 {branch}，宫位 {self.life_palace}"
        )
        self.calculation_steps['step5'] = f"宫名: 从宫位 {self.life_palace} 起命宫，逆排十二宫"

    def _calculate_five_elements(self):
        life = self._palace(self.life_palace)
        self.five_elements = resolve_bureau(life['heavenly_stem'], life['earthly_branch'])
        self.calculation_steps['step6'] = (
            f"五行局: 命宫 {life['heavenly_stem']}{life['earthly_branch']} -> {self.five_elements}"
        )

    def _new_star(self, name: str, palace: int) -> Dict[str, Any]:
        return {
            'name': name,
            'key': normalize_star_name(name),
            'brightness': 'bright',
            'palace': palace,
            'transformations': [],
            'self_influence': [],
        }

    def _place_ziwei(self):
        self._ziwei_branch = place_ziwei(self.lunar_date.day_name, self.five_elements)
        self.ziwei_position = branch_to_palace(self._ziwei_branch)
        self.calculation_steps['step7'] = (
            f"紫微: {self.lunar_date.day_name} {self.five_elements} -> {self._ziwei_branch}，宫位 {self.ziwei_position}"
        )

    def _place_main_stars(self):
        for branch, stars in place_main_stars(self._ziwei_branch).items():
            number = branch_to_palace(branch)
            self._palace(number)['main_stars'] = [self._new_star(name, number) for name in stars]
        self.calculation_steps['step8'] = f"主星: 按紫微在{self._ziwei_branch}盘式安十四主星"

    def _place_support_stars(self):
        month = self._basis_month()
        hour_branch = hour_to_branch(self.birth_input.hour)
        left, right = place_left_right(month)
        chang, qu = place_wenchang_wenqu(hour_branch)
        placed = []
        for name, branch in ((LEFT_SUPPORT, left), (RIGHT_SUPPORT, right), (WEN_CHANG, chang), (WEN_QU, qu)):
            number = branch_to_palace(branch)
            self._palace(number)['minor_stars'].append(self._new_star(name, number))
            placed.append(f"{name} {branch}（宫位 {number}）")
        self.calculation_steps['step9'] = f"辅星: 月 {month}，时支 {self.pillars['hour']['branch_name']}: " + "，".join(placed)

    def _calculate_transformations(self):
        year_stem = self.pillars['year']['stem_name']
        self.transformations = apply_birth_year_transformations(self.palaces, year_stem)
        parts = [f"{TRANSFORMATION_TAGS[key]} {star or '未落宫'}" for key, star in self.transformations.items()]
        self.calculation_steps['step10'] = f"生年四化（{year_stem}）: " + "，".join(parts)

    def _calculate_self_influence(self):
        count = apply_self_influence(self.palaces)
        self.calculation_steps['step11'] = f"自化: 按各宫宫干计算，共 {count} 处"

    def _calculate_opposite_influence(self):
        count = apply_opposite_influence(self.palaces)
        self.calculation_steps['step12'] = f"对宫化入: 按对宫宫干计算，共 {count} 处"

    def _calculate_major_limits(self):
        gender = self.birth_input.gender
        limits = assign_major_limits(self.life_palace, self.five_elements, gender, self.yin_yang)
        for number, limit in limits.items():
            self._palace(number)['major_limit'] = limit
        direction = '顺行' if limit_direction(gender, self.yin_yang) == CLOCKWISE else '逆行'
        start_age = limits[self.life_palace]['start_age']
        self.calculation_steps['step13'] = (
            f"大限: {self.five_elements} {start_age} 岁起于命宫（宫位 {self.life_palace}），"
            f"{gender}/{self.yin_yang} {direction}"
        )

    def _calculate_annual_flow(self, target_year: int):
        base_year = self.config.annual_flow_base_year
        base_palace = self.config.annual_flow_base_palace
        self.annual_flow = map_annual_flow(target_year, base_year, base_palace)
        for number, flow in palace_flow_years(target_year, base_year, base_palace).items():
            self._palace(number)['annual_flow'] = flow
        self.calculation_steps['step14'] = (
            f"流年: {target_year} {self.annual_flow['heavenly_stem']}{self.annual_flow['earthly_branch']} "
            f"落宫位 {self.annual_flow['palace']}（锚点 {base_year} 在宫位 {base_palace}）"
        )

    def _format_result(self) -> ChartModel:
        """格式化为不可变命盘"""
        life = self._palace(self.life_palace)
        main_star = life['main_stars'][0]['name'] if life['main_stars'] else ''
        year = self.pillars['year']
        return ChartModel.model_validate({
            'input': self.birth_input,
            'lunar_date': self.lunar_date,
            'year_pillar': year,
            'month_pillar': self.pillars['month'],
            'day_pillar': self.pillars['day'],
            'hour_pillar': self.pillars['hour'],
            'earthly_branch': year['branch_name'],
            'heavenly_stem': year['stem_name'],
            'yin_yang': self.yin_yang,
            'palaces': self.palaces,
            'life_palace': self.life_palace,
            'five_elements': self.five_elements,
            'ziwei_position': self.ziwei_position,
            'main_star': main_star,
            'transformations': {
                'lu': self.transformations.get('祿'),
                'quan': self.transformations.get('權'),
                'ke': self.transformations.get('科'),
                'ji': self.transformations.get('忌'),
            },
            'annual_flow': self.annual_flow,
            'annual_flow_anchor': {
                'base_year': self.config.annual_flow_base_year,
                'base_palace': self.config.annual_flow_base_palace,
            },
            'calculation_steps': tuple(self.calculation_steps.items()),
        })


def with_annual_flow(chart: ChartModel, target_year: int) -> ChartModel:
    """
    按目标年份重算流年

    使用建盘时记录的锚点，返回新命盘；除流年字段外其余字段与原盘完全一致，原盘不变。

    Args:
        chart: 原命盘
        target_year: 目标年份

    Returns:
        ChartModel: 新命盘
    """
    anchor = chart.annual_flow_anchor
    flows = palace_flow_years(target_year, anchor.base_year, anchor.base_palace)
    palaces = tuple(
        palace.model_copy(update={'annual_flow': AnnualFlowModel(**flows[palace.number])})
        for palace in chart.palaces
    )
    selected = SelectedAnnualFlowModel(**map_annual_flow(target_year, anchor.base_year, anchor.base_palace))
    return chart.model_copy(update={'palaces': palaces, 'annual_flow': selected})


def calculate_chart(birth_input: Union[BirthInput, Dict[str, Any]],
                    target_year: Optional[int] = None,
                    config: Optional[ZiweiConfig] = None) -> ChartModel:
    """排盘便捷函数"""
    return ZiweiCalculator(birth_input, config=config).calculate(target_year)


__all__ = ['ZiweiCalculator', 'with_annual_flow', 'calculate_chart']
