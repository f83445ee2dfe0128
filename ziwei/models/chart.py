#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微命盘数据模型

命盘构建完成后即为不可变快照（frozen），唯一允许的派生操作是按目标年份
重新计算流年，返回只替换 annual_flow 相关字段的副本。
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ziwei.models.request import BirthInput


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class LunarDateModel(_FrozenModel):
    """农历日期"""
    year: int = Field(..., description="农历年")
    month: int = Field(..., description="农历月（闰月同样为月序号）")
    day: int = Field(..., description="农历日，转换失败时为 0")
    is_leap: bool = Field(False, description="是否闰月")
    is_unknown: bool = Field(False, description="转换失败的占位结果")
    day_name: str = Field("", description="农历日中文名，如 初七；失败时为 未知")


class StemBranchModel(_FrozenModel):
    """干支对（序号 1 起始）"""
    stem: int = Field(..., ge=1, le=10, description="天干序号 1-10")
    branch: int = Field(..., ge=1, le=12, description="地支序号 1-12")
    stem_name: str = Field(..., description="天干")
    branch_name: str = Field(..., description="地支")


class StarModel(_FrozenModel):
    """星曜，以 (name, palace) 唯一确定"""
    name: str
    brightness: Literal['bright', 'dim'] = 'bright'
    palace: int = Field(..., ge=1, le=12)
    transformations: Tuple[str, ...] = Field((), description="生年四化，如 化祿")
    self_influence: Tuple[str, ...] = Field((), description="自化")


class MajorLimitModel(_FrozenModel):
    """大限"""
    start_age: int
    end_age: int


class AnnualFlowModel(_FrozenModel):
    """流年"""
    year: int
    heavenly_stem: str
    earthly_branch: str


class SelectedAnnualFlowModel(_FrozenModel):
    """当前查询年份的流年落宫"""
    year: int
    palace: int = Field(..., ge=1, le=12)
    stem: int = Field(..., ge=1, le=10)
    branch: int = Field(..., ge=1, le=12)
    heavenly_stem: str
    earthly_branch: str


class AnnualFlowAnchorModel(_FrozenModel):
    """流年锚点：基准年份落在基准宫位"""
    base_year: int
    base_palace: int = Field(..., ge=1, le=12)


class OppositeInfluenceModel(_FrozenModel):
    """对宫化入"""
    star_name: str
    transformation: str
    source_palace: int = Field(..., ge=1, le=12)


class PalaceModel(_FrozenModel):
    """宫位"""
    number: int = Field(..., ge=1, le=12)
    earthly_branch: str
    heavenly_stem: str
    name: str
    main_stars: Tuple[StarModel, ...] = ()
    minor_stars: Tuple[StarModel, ...] = ()
    major_limit: MajorLimitModel
    annual_flow: AnnualFlowModel
    opposite_palace_influence: Tuple[OppositeInfluenceModel, ...] = ()

    @property
    def stars(self) -> Tuple[StarModel, ...]:
        return self.main_stars + self.minor_stars


class FourTransformationsModel(_FrozenModel):
    """生年四化对应星曜（未匹配到时为 None）"""
    lu: Optional[str] = None
    quan: Optional[str] = None
    ke: Optional[str] = None
    ji: Optional[str] = None


class ChartModel(_FrozenModel):
    """紫微命盘"""
    input: BirthInput
    lunar_date: LunarDateModel
    year_pillar: StemBranchModel
    month_pillar: StemBranchModel
    day_pillar: StemBranchModel
    hour_pillar: StemBranchModel
    earthly_branch: str = Field(..., description="年支")
    heavenly_stem: str = Field(..., description="年干")
    yin_yang: Literal['Yin', 'Yang']
    palaces: Tuple[PalaceModel, ...]
    life_palace: int = Field(..., ge=1, le=12)
    five_elements: str
    ziwei_position: int = Field(..., ge=1, le=12)
    main_star: str = Field("", description="命宫第一颗主星，空宫为空字符串")
    transformations: FourTransformationsModel
    annual_flow: SelectedAnnualFlowModel
    annual_flow_anchor: AnnualFlowAnchorModel
    calculation_steps: Tuple[Tuple[str, str], ...] = Field((), description="排盘步骤 (step 键, 说明)，按执行顺序")

    def palace(self, number: int) -> PalaceModel:
        """按序号取宫位"""
        return self.palaces[number - 1]

    def palace_by_name(self, name: str) -> Optional[PalaceModel]:
        """按宫名取宫位"""
        for palace in self.palaces:
            if palace.name == name:
                return palace
        return None

    def step(self, key: str) -> Optional[str]:
        """按 step 键取排盘步骤说明"""
        for step_key, text in self.calculation_steps:
            if step_key == key:
                return text
        return None
