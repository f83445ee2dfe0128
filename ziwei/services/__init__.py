#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
服务层
"""

from .chart_service import ChartService

__all__ = ['ChartService']
