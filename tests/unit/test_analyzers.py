#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""星曜评分、执行风格、财富密码单元测试"""

import pytest

from ziwei.analyzers import (
    BarOptions,
    PalaceBarsAnalyzer,
    compute_career_bars,
    compute_life_bars,
    compute_wealth_bars,
    palace_star_keys,
    to_bar,
    classify_execution,
    classify_wealth_codes,
    explain_wealth_code_votes,
)
from ziwei.analyzers.palace_bars_analyzer import round_half_up, build_weighted_list
from ziwei.analyzers.execution_style_analyzer import COMMANDER, ARCHITECT, CATALYST, INTEGRATOR
from ziwei.analyzers.wealth_code_analyzer import (
    STRATEGY_PLANNER,
    INVESTMENT_BRAIN,
    BRANDING_MAGNET,
    COLLABORATOR,
)


class TestToBar:
    """单维度评分"""

    def test_no_signal_is_neutral(self):
        assert to_bar(0, 0) == 70
        assert to_bar(None, None) == 70

    def test_hard_floor(self):
        assert to_bar(-3, 3) == 60
        assert to_bar(3, 3) == 100

    def test_half_up_rounding(self):
        # 50 + 12.5 + 20 = 82.5
        assert to_bar(1, 4) == 83

    def test_rescale(self):
        options = BarOptions(floor_mode='rescale')
        assert to_bar(-1, 1, options) == 60
        assert to_bar(1, 1, options) == 100
        assert to_bar(0, 2, options) == 80

    def test_invalid_floor_mode(self):
        with pytest.raises(ValueError):
            BarOptions(floor_mode='soft')

    @pytest.mark.parametrize("value, expected", [(82.5, 83), (82.4, 82), (-0.5, 0), (70, 70)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestBars:
    """三宫五维"""

    def test_career_single_star(self):
        assert compute_career_bars(['紫微']) == {
            'decision_speed': 60,
            'structure_pref': 100,
            'risk_tolerance': 70,
            'collaboration': 100,
            'clarity_focus': 100,
        }

    def test_wealth_with_support(self):
        assert compute_wealth_bars(['武曲', '贪狼'], ['文昌']) == {
            'earning_drive': 100,
            'asset_strategy': 87,
            'risk_leverage': 100,
            'money_discipline': 63,
            'deal_flow_network': 100,
        }

    def test_empty_palace_all_neutral(self):
        assert set(compute_life_bars([]).values()) == {70}

    def test_traditional_names_normalized(self):
        assert compute_career_bars([], ['左輔']) == compute_career_bars([], ['左辅'])

    def test_unknown_star_ignored(self):
        assert compute_life_bars(['天魁']) == compute_life_bars([])

    def test_support_weight(self):
        stars = build_weighted_list(['紫微'], ['文昌'])
        assert stars == [('紫微', 1), ('文昌', 0.5)]

    def test_bars_in_range(self):
        for majors in (['破军', '七杀'], ['天同', '太阴'], ['贪狼']):
            for bars in (compute_career_bars(majors), compute_life_bars(majors), compute_wealth_bars(majors)):
                assert all(60 <= value <= 100 for value in bars.values())


class TestPalaceBarsAnalyzer:
    """命盘三宫评分"""

    def test_palace_star_keys(self, sample_chart):
        majors, supports = palace_star_keys(sample_chart, '官禄')
        assert majors == ['天机']
        assert supports == []

    def test_missing_palace(self, sample_chart):
        assert palace_star_keys(sample_chart, '不存在') == ([], [])

    def test_analyze(self, sample_chart):
        result = PalaceBarsAnalyzer.analyze(sample_chart)
        assert set(result) == {'life', 'wealth', 'career'}
        # 财帛宫（宫位 11）为空宫
        assert set(result['wealth'].values()) == {70}
        assert result['life'] == compute_life_bars(['巨门', '天同'])


class TestExecutionStyle:
    """执行风格"""

    def test_commander(self):
        result = classify_execution(['武曲', '七杀', '文昌', '右弼'])
        assert result['type'] == COMMANDER
        assert result['bars'] == {
            'decision_speed': 74,
            'structure_pref': 82,
            'risk_tolerance': 74,
            'collaboration': 50,
            'clarity_focus': 58,
        }

    @pytest.mark.parametrize("stars, expected", [
        (['天机'], ARCHITECT),
        (['破军'], CATALYST),
        (['廉贞', '天同'], INTEGRATOR),
        ([], COMMANDER),
    ])
    def test_quadrants(self, stars, expected):
        assert classify_execution(stars)['type'] == expected

    def test_bars_clamped(self):
        result = classify_execution(['破军', '贪狼', '七杀', '太阳'])
        assert result['bars']['decision_speed'] == 100
        assert result['bars']['structure_pref'] == 18
        assert result['raw']['speed'] == 8


class TestWealthCodes:
    """财富密码"""

    def test_votes_then_priority(self):
        assert classify_wealth_codes(['紫微', '天府']) == [STRATEGY_PLANNER, INVESTMENT_BRAIN]

    def test_tie_break(self):
        assert classify_wealth_codes(['天同', '破军']) == [INVESTMENT_BRAIN, COLLABORATOR]
        assert classify_wealth_codes(['天同', '破军'], tie_break='alpha') == [COLLABORATOR, INVESTMENT_BRAIN]

    def test_invalid_tie_break(self):
        with pytest.raises(ValueError):
            classify_wealth_codes(['紫微'], tie_break='random')

    def test_limit(self):
        assert classify_wealth_codes(['文昌', '左辅'], limit=1) == [STRATEGY_PLANNER]

    def test_duplicates_count_twice(self):
        assert classify_wealth_codes(['太阳', '太阳', '紫微']) == [BRANDING_MAGNET, STRATEGY_PLANNER]

    def test_unknown_and_empty(self):
        assert classify_wealth_codes([]) == []
        assert classify_wealth_codes(['天魁']) == []

    def test_traditional_names(self):
        assert classify_wealth_codes(['左輔']) == [STRATEGY_PLANNER, COLLABORATOR]

    def test_explain(self):
        explained = explain_wealth_code_votes(['天府', '天府', '武曲', '太阳'])
        # 同权重按默认优先级
        assert explained[0] == {'code': STRATEGY_PLANNER, 'weight': 2, 'triggers': ['天府', '武曲']}
        assert explained[1] == {'code': INVESTMENT_BRAIN, 'weight': 2, 'triggers': ['天府', '武曲']}
        assert explained[2] == {'code': BRANDING_MAGNET, 'weight': 1, 'triggers': ['太阳']}
        assert len(explained) == 3
