#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块
"""

from .app_config import (
    ZiweiConfig,
    MONTH_BASIS_LUNAR,
    MONTH_BASIS_SOLAR,
    get_config,
    reset_config,
    load_env_file,
)

__all__ = [
    'ZiweiConfig',
    'MONTH_BASIS_LUNAR',
    'MONTH_BASIS_SOLAR',
    'get_config',
    'reset_config',
    'load_env_file',
]
