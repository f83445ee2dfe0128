#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数数据模块

- constants: 天干地支、宫名、四化标签等基础常量
- tables: 命宫、五行局、紫微、主星、辅星、四化查表
"""
