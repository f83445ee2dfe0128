#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘请求模型 - 出生信息及其验证器
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ziwei.data.constants import GENDERS


class BirthInput(BaseModel):
    """出生信息（公历）"""
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="公历年", examples=[1999])
    month: int = Field(..., description="公历月 1-12", examples=[12])
    day: int = Field(..., description="公历日", examples=[14])
    hour: int = Field(..., description="出生小时 0-23", examples=[9])
    gender: str = Field(..., description="性别：male(男) 或 female(女)", examples=["male"])
    name: str = Field("", description="姓名（仅展示用）", examples=["张三"])

    @field_validator('month')
    @classmethod
    def validate_month(cls, v):
        """验证月份"""
        if not 1 <= v <= 12:
            raise ValueError('月份必须在 1-12 之间')
        return v

    @field_validator('hour')
    @classmethod
    def validate_hour(cls, v):
        """验证时辰"""
        if not 0 <= v <= 23:
            raise ValueError('小时必须在 0-23 之间')
        return v

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        """验证性别"""
        if v not in GENDERS:
            raise ValueError('性别必须为 male 或 female')
        return v

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return (v or '').strip()

    @model_validator(mode='after')
    def validate_date(self):
        """验证公历日期是否存在"""
        try:
            date(self.year, self.month, self.day)
        except ValueError:
            raise ValueError(f'日期不存在: {self.year}-{self.month:02d}-{self.day:02d}')
        return self
