#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
- 全局配置
"""

import pytest
import sys
import os
from typing import Dict, Any

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from ziwei.config import ZiweiConfig, MONTH_BASIS_SOLAR, reset_config
from ziwei.utils import cache as cache_module


# ==================== 配置 Fixtures ====================

@pytest.fixture(autouse=True)
def clean_global_state(monkeypatch):
    """
    每个测试使用干净的全局配置和缓存

    清掉 ZIWEI_* 环境变量，避免本机 .env 影响断言。
    """
    for key in list(os.environ):
        if key.startswith('ZIWEI_'):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    cache_module._chart_cache = None
    yield
    reset_config()
    cache_module._chart_cache = None


@pytest.fixture(scope="function")
def lunar_config() -> ZiweiConfig:
    """默认配置（农历月取命宫）"""
    return ZiweiConfig()


@pytest.fixture(scope="function")
def solar_config() -> ZiweiConfig:
    """公历月取命宫的配置"""
    return ZiweiConfig(month_basis=MONTH_BASIS_SOLAR)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_birth() -> Dict[str, Any]:
    """
    示例出生信息

    Returns:
        出生信息字典（公历 1999-12-14 09 时，男）
    """
    return {
        "year": 1999,
        "month": 12,
        "day": 14,
        "hour": 9,
        "gender": "male",
        "name": "测试",
    }


@pytest.fixture(scope="function")
def sample_chart(sample_birth, lunar_config):
    """示例命盘（流年 2025）"""
    from ziwei.calculators.ziwei_calculator import ZiweiCalculator
    return ZiweiCalculator(sample_birth, config=lunar_config).calculate(target_year=2025)


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "unit: 单元测试")


def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    自动为测试添加标记
    """
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)


# ==================== 辅助函数 ====================

def assert_response_success(response: Dict[str, Any]):
    """
    断言响应成功

    Args:
        response: 服务响应字典
    """
    assert response.get("success") is True, f"Expected success=True, got {response}"
    assert response.get("error") is None, f"Unexpected error: {response.get('error')}"


def assert_response_failure(response: Dict[str, Any]):
    """
    断言响应失败

    Args:
        response: 服务响应字典
    """
    assert response.get("success") is False, f"Expected success=False, got {response}"
    assert response.get("error") is not None, "Expected error message"
