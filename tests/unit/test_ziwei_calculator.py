#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""ZiweiCalculator 排盘单元测试"""

import pytest
from unittest.mock import patch
from pydantic import ValidationError

from ziwei.calculators.ziwei_calculator import ZiweiCalculator, with_annual_flow, calculate_chart
from ziwei.data.constants import MAIN_STARS, PALACE_NAMES
from ziwei.models import BirthInput, ChartModel
from ziwei.utils.exceptions import DateRangeError, LookupMissError, CalendarConversionDegraded


def _main_star_names(chart, number):
    return [star.name for star in chart.palace(number).main_stars]


def _minor_star_names(chart, number):
    return [star.name for star in chart.palace(number).minor_stars]


class TestInit:
    def test_accepts_dict(self, sample_birth):
        calc = ZiweiCalculator(sample_birth)
        assert isinstance(calc.birth_input, BirthInput)
        assert calc.last_result is None

    def test_invalid_input_rejected(self, sample_birth):
        with pytest.raises(ValidationError):
            ZiweiCalculator({**sample_birth, 'gender': 'x'})

    def test_caches_result(self, sample_birth):
        calc = ZiweiCalculator(sample_birth)
        result = calc.calculate(target_year=2025)
        assert calc.last_result is result

    def test_stars_carry_normalized_key(self, sample_birth):
        calc = ZiweiCalculator(sample_birth)
        calc.calculate(target_year=2025)
        left = calc.palaces[9]['minor_stars'][0]
        assert (left['name'], left['key']) == ('左輔', '左辅')
        assert all(star['key'] for p in calc.palaces for star in p['main_stars'] + p['minor_stars'])


class TestLunarBasisChart:
    """默认（农历月）排盘：1999-12-14 09 时 男，农历十一月初七"""

    def test_year_pair(self, sample_chart):
        assert sample_chart.heavenly_stem == '己'
        assert sample_chart.earthly_branch == '卯'
        assert sample_chart.yin_yang == 'Yin'

    def test_lunar_date(self, sample_chart):
        lunar = sample_chart.lunar_date
        assert (lunar.year, lunar.month, lunar.day_name) == (1999, 11, '初七')

    def test_life_palace_and_bureau(self, sample_chart):
        assert sample_chart.life_palace == 3
        assert sample_chart.palace(3).earthly_branch == '未'
        assert sample_chart.palace(3).heavenly_stem == '辛'
        assert sample_chart.five_elements == '土五局'
        assert sample_chart.ziwei_position == 8

    def test_palace_names(self, sample_chart):
        expected = {
            3: '命宫', 2: '兄弟', 1: '夫妻', 12: '子女', 11: '财帛', 10: '疾厄',
            9: '迁移', 8: '交友', 7: '官禄', 6: '田宅', 5: '福德', 4: '父母',
        }
        assert {p.number: p.name for p in sample_chart.palaces} == expected

    def test_main_stars(self, sample_chart):
        assert _main_star_names(sample_chart, 8) == ['紫微']
        assert _main_star_names(sample_chart, 10) == ['破军']
        assert _main_star_names(sample_chart, 12) == ['天府', '廉贞']
        assert _main_star_names(sample_chart, 3) == ['巨门', '天同']
        assert _main_star_names(sample_chart, 9) == []
        assert _main_star_names(sample_chart, 11) == []
        assert sample_chart.main_star == '巨门'

    def test_support_stars(self, sample_chart):
        assert _minor_star_names(sample_chart, 10) == ['左輔']
        assert _minor_star_names(sample_chart, 8) == ['右弼']
        assert _minor_star_names(sample_chart, 1) == ['文昌']
        assert _minor_star_names(sample_chart, 5) == ['文曲']

    def test_four_transformations(self, sample_chart):
        t = sample_chart.transformations
        assert (t.lu, t.quan, t.ke, t.ji) == ('武曲', '贪狼', '天梁', '文曲')
        wuqu = sample_chart.palace(4).main_stars[1]
        assert wuqu.name == '武曲'
        assert wuqu.transformations == ('化祿',)
        assert sample_chart.palace(5).minor_stars[0].transformations == ('化忌',)

    def test_self_influence(self, sample_chart):
        assert sample_chart.palace(3).main_stars[0].self_influence == ('化祿',)
        assert sample_chart.palace(4).main_stars[1].self_influence == ('化忌',)
        assert sample_chart.palace(7).main_stars[0].self_influence == ('化祿',)

    def test_opposite_influence(self, sample_chart):
        influence = sample_chart.palace(3).opposite_palace_influence
        assert [(i.star_name, i.transformation, i.source_palace) for i in influence] == [
            ('天同', '化權', 9), ('巨门', '化忌', 9),
        ]
        left = sample_chart.palace(10).opposite_palace_influence
        assert [(i.star_name, i.transformation, i.source_palace) for i in left] == [('左輔', '化科', 4)]
        assert sample_chart.palace(9).opposite_palace_influence == ()

    def test_major_limits(self, sample_chart):
        assert sample_chart.palace(3).major_limit.start_age == 5
        assert sample_chart.palace(3).major_limit.end_age == 14
        assert sample_chart.palace(2).major_limit.start_age == 15
        assert sample_chart.palace(4).major_limit.start_age == 115

    def test_annual_flow(self, sample_chart):
        flow = sample_chart.annual_flow
        assert (flow.year, flow.palace, flow.heavenly_stem, flow.earthly_branch) == (2025, 1, '乙', '巳')
        assert sample_chart.palace(1).annual_flow.year == 2025
        assert sample_chart.palace(12).annual_flow.year == 2036

    def test_calculation_steps(self, sample_chart):
        assert [key for key, _ in sample_chart.calculation_steps] == [f"step{i}" for i in range(1, 15)]
        assert sample_chart.step('step6') == '五行局: 命宫 辛未 -> 土五局'
        assert sample_chart.step('step99') is None

    def test_calculation_steps_immutable(self, sample_chart):
        assert isinstance(sample_chart.calculation_steps, tuple)
        with pytest.raises(TypeError):
            sample_chart.calculation_steps[0] = ('step1', '改写')


class TestSolarBasisChart:
    """公历月取命宫，对照旧参考盘"""

    @pytest.fixture
    def chart(self, sample_birth, solar_config):
        return ZiweiCalculator(sample_birth, config=solar_config).calculate(target_year=2025)

    def test_reference_scenario(self, chart):
        assert chart.earthly_branch == '卯'
        assert chart.heavenly_stem == '己'
        assert chart.five_elements == '金四局'
        assert chart.ziwei_position == 10
        assert chart.life_palace == 4
        t = chart.transformations
        assert (t.lu, t.quan, t.ke, t.ji) == ('武曲', '贪狼', '天梁', '文曲')

    def test_main_stars(self, chart):
        assert _main_star_names(chart, 10) == ['紫微', '天府']
        assert _main_star_names(chart, 8) == ['破军']
        assert _main_star_names(chart, 2) == ['天相', '廉贞']
        assert chart.main_star == '七杀'

    def test_support_stars(self, chart):
        assert _minor_star_names(chart, 11) == ['左輔']
        assert _minor_star_names(chart, 7) == ['右弼']

    def test_major_limits_start(self, chart):
        assert chart.palace(4).major_limit.start_age == 4
        assert chart.palace(3).major_limit.start_age == 14


class TestChartInvariants:
    """命盘不变量"""

    CASES = [
        {'year': 1999, 'month': 12, 'day': 14, 'hour': 9, 'gender': 'male'},
        {'year': 1987, 'month': 1, 'day': 7, 'hour': 23, 'gender': 'female'},
        {'year': 2008, 'month': 9, 'day': 8, 'hour': 16, 'gender': 'female'},
        {'year': 2020, 'month': 5, 'day': 23, 'hour': 0, 'gender': 'male'},
        {'year': 1950, 'month': 2, 'day': 17, 'hour': 12, 'gender': 'male'},
    ]

    @pytest.fixture(params=CASES, ids=lambda c: f"{c['year']}-{c['month']}-{c['day']}-{c['hour']}")
    def chart(self, request) -> ChartModel:
        return calculate_chart(request.param, target_year=2026)

    def test_twelve_distinct_branches(self, chart):
        assert len(chart.palaces) == 12
        assert len({p.earthly_branch for p in chart.palaces}) == 12

    def test_names_permutation(self, chart):
        assert sorted(p.name for p in chart.palaces) == sorted(PALACE_NAMES)
        assert chart.palace(chart.life_palace).name == '命宫'

    def test_each_main_star_once(self, chart):
        names = [star.name for p in chart.palaces for star in p.main_stars]
        assert sorted(names) == sorted(MAIN_STARS)
        assert all(len(p.main_stars) <= 2 for p in chart.palaces)
        assert '紫微' in [s.name for s in chart.palace(chart.ziwei_position).main_stars]

    def test_star_palace_matches_container(self, chart):
        for palace in chart.palaces:
            for star in palace.stars:
                assert star.palace == palace.number

    def test_major_limits_partition(self, chart):
        starts = sorted(p.major_limit.start_age for p in chart.palaces)
        assert starts == [starts[0] + 10 * i for i in range(12)]
        assert chart.palace(chart.life_palace).major_limit.start_age == starts[0]

    def test_deterministic(self, chart):
        again = calculate_chart(chart.input, target_year=2026)
        assert again == chart

    def test_model_dump(self, chart):
        data = chart.model_dump()
        assert data['life_palace'] == chart.life_palace
        assert len(data['palaces']) == 12


class TestWithAnnualFlow:
    """流年重算"""

    def test_only_annual_flow_changes(self, sample_chart):
        updated = with_annual_flow(sample_chart, 2026)
        assert updated.annual_flow.year == 2026
        assert updated.annual_flow.palace == 2
        assert sample_chart.annual_flow.year == 2025
        strip = {'annual_flow': True, 'palaces': {'__all__': {'annual_flow'}}}
        assert updated.model_dump(exclude=strip) == sample_chart.model_dump(exclude=strip)

    def test_idempotent(self, sample_chart):
        once = with_annual_flow(sample_chart, 2030)
        twice = with_annual_flow(once, 2030)
        assert once == twice

    def test_matches_fresh_build(self, sample_birth, sample_chart):
        fresh = ZiweiCalculator(sample_birth).calculate(target_year=2031)
        assert with_annual_flow(sample_chart, 2031) == fresh.model_copy(
            update={'calculation_steps': sample_chart.calculation_steps}
        )

    def test_chart_is_frozen(self, sample_chart):
        with pytest.raises(ValidationError):
            sample_chart.life_palace = 1


class TestErrors:
    """错误处理"""

    def test_year_out_of_range(self, sample_birth):
        with pytest.raises(DateRangeError):
            calculate_chart({**sample_birth, 'year': 1800})

    def test_degraded_lunar_aborts(self, sample_birth):
        with patch('ziwei.calculators.lunar_converter.Solar.fromYmd', side_effect=RuntimeError('boom')):
            with pytest.raises(LookupMissError):
                calculate_chart(sample_birth)

    def test_degraded_lunar_strict(self, sample_birth):
        with patch('ziwei.calculators.lunar_converter.Solar.fromYmd', side_effect=RuntimeError('boom')):
            with pytest.raises(CalendarConversionDegraded):
                ZiweiCalculator(sample_birth, strict=True).calculate()
