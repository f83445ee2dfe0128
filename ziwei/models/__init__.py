#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
数据模型
"""

from .request import BirthInput
from .chart import (
    LunarDateModel,
    StemBranchModel,
    StarModel,
    MajorLimitModel,
    AnnualFlowModel,
    SelectedAnnualFlowModel,
    AnnualFlowAnchorModel,
    OppositeInfluenceModel,
    PalaceModel,
    FourTransformationsModel,
    ChartModel,
)

__all__ = [
    'BirthInput',
    'LunarDateModel',
    'StemBranchModel',
    'StarModel',
    'MajorLimitModel',
    'AnnualFlowModel',
    'SelectedAnnualFlowModel',
    'AnnualFlowAnchorModel',
    'OppositeInfluenceModel',
    'PalaceModel',
    'FourTransformationsModel',
    'ChartModel',
]
