#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
测试统一配置管理
"""

import os
import logging

import pytest
from unittest.mock import patch

from ziwei.config import (
    ZiweiConfig,
    MONTH_BASIS_LUNAR,
    MONTH_BASIS_SOLAR,
    get_config,
    reset_config,
    load_env_file,
)
from ziwei.calculators.ziwei_calculator import ZiweiCalculator
from ziwei.calculators.ziwei_logging import setup_logging, SafeStreamHandler


class TestConfig:
    """配置测试类"""

    def test_defaults(self):
        """测试默认配置"""
        with patch.dict(os.environ, {}, clear=True):
            config = ZiweiConfig.from_env()

            assert config.min_year == 1900
            assert config.max_year == 2100
            assert config.month_basis == MONTH_BASIS_LUNAR
            assert config.annual_flow_base_year == 2013
            assert config.annual_flow_base_palace == 1
            assert config.log_level == 'INFO'

    def test_from_env(self):
        """测试从环境变量创建配置"""
        with patch.dict(os.environ, {
            'ZIWEI_MIN_YEAR': '1950',
            'ZIWEI_MAX_YEAR': '2050',
            'ZIWEI_MONTH_BASIS': 'SOLAR',
            'ZIWEI_ANNUAL_FLOW_BASE_YEAR': '2020',
            'ZIWEI_ANNUAL_FLOW_BASE_PALACE': '8',
            'ZIWEI_LOG_LEVEL': 'debug',
            'ZIWEI_CACHE_TTL': '60',
        }):
            config = ZiweiConfig.from_env()

            assert config.min_year == 1950
            assert config.max_year == 2050
            assert config.month_basis == MONTH_BASIS_SOLAR
            assert config.annual_flow_base_year == 2020
            assert config.annual_flow_base_palace == 8
            assert config.log_level == 'DEBUG'
            assert config.cache_ttl == 60

    def test_invalid_int_falls_back(self):
        """测试非法整数回退默认值"""
        with patch.dict(os.environ, {'ZIWEI_MIN_YEAR': 'abc'}):
            assert ZiweiConfig.from_env().min_year == 1900

    @pytest.mark.parametrize("kwargs", [
        {'month_basis': 'gregorian'},
        {'min_year': 2100, 'max_year': 1900},
        {'annual_flow_base_palace': 13},
    ])
    def test_invalid_values(self, kwargs):
        """测试非法配置"""
        with pytest.raises(ValueError):
            ZiweiConfig(**kwargs)

    def test_singleton(self):
        """测试全局配置单例"""
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2

        reset_config()
        assert get_config() is not config1

    def test_load_env_file(self, tmp_path, monkeypatch):
        """测试 .env 文件加载（不覆盖已有环境变量）"""
        env_file = tmp_path / '.env'
        env_file.write_text('ZIWEI_MONTH_BASIS=solar\nZIWEI_MAX_YEAR=2000\n', encoding='utf-8')
        monkeypatch.setenv('ZIWEI_MAX_YEAR', '2099')

        assert load_env_file(str(env_file)) is True
        try:
            config = ZiweiConfig.from_env()
            assert config.month_basis == MONTH_BASIS_SOLAR
            assert config.max_year == 2099
        finally:
            os.environ.pop('ZIWEI_MONTH_BASIS', None)

    def test_load_missing_env_file(self, tmp_path):
        assert load_env_file(str(tmp_path / 'missing.env')) is False


class TestLogging:
    """日志"""

    def test_setup_logging(self):
        logger = setup_logging('debug')
        assert logger.name == 'ziwei'
        assert logger.level == logging.DEBUG
        setup_logging('INFO')
        assert logger.level == logging.INFO

    def test_handler_installed(self):
        setup_logging()
        logger = logging.getLogger('ziwei')
        assert any(isinstance(h, SafeStreamHandler) for h in logger.handlers)

    def test_setup_logging_idempotent(self):
        """测试：重复调用只挂载一个处理器"""
        setup_logging('debug')
        logger = setup_logging('debug')
        handlers = [h for h in logger.handlers if isinstance(h, SafeStreamHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG
        setup_logging('INFO')

    def test_invalid_level_falls_back(self):
        logger = setup_logging('loud')
        assert logger.level == logging.INFO

    def test_calculator_logs_via_module_logger(self, sample_birth, caplog):
        with caplog.at_level(logging.INFO, logger='ziwei'):
            ZiweiCalculator(sample_birth).calculate(target_year=2025)
        assert any(r.name == 'ziwei.calculators.ziwei_calculator' for r in caplog.records)

    def test_broken_pipe_ignored(self):
        handler = SafeStreamHandler()
        record = logging.LogRecord('ziwei', logging.INFO, __file__, 1, 'msg', None, None)
        with patch.object(logging.StreamHandler, 'emit', side_effect=BrokenPipeError):
            handler.emit(record)
