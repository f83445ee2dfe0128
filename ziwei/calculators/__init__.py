#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘计算模块

- lunar_converter: 公历转农历（lunar_python）
- ziwei_core: 各排盘步骤纯函数
- ziwei_calculator: ZiweiCalculator 排盘主类
"""
