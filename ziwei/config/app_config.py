#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一排盘配置管理
所有配置统一从这里读取，避免配置分散
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MONTH_BASIS_LUNAR = 'lunar'
MONTH_BASIS_SOLAR = 'solar'


def _get_int(key: str, default: int) -> int:
    """读取整型环境变量，非法值回退默认值"""
    value = os.getenv(key)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
        return default


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    加载 .env 文件

    Args:
        env_path: .env 文件路径，默认当前工作目录下的 .env

    Returns:
        bool: 是否找到并加载了文件
    """
    from dotenv import load_dotenv

    path = Path(env_path) if env_path else Path.cwd() / '.env'
    if not path.exists():
        return False
    load_dotenv(path, override=False)
    logger.debug(f"已加载环境变量文件: {path}")
    return True


@dataclass(frozen=True)
class ZiweiConfig:
    """排盘配置"""
    min_year: int = 1900
    max_year: int = 2100
    # 命宫、左輔右弼取月：lunar(农历月) 或 solar(公历月，兼容旧参考盘)
    month_basis: str = MONTH_BASIS_LUNAR
    annual_flow_base_year: int = 2013
    annual_flow_base_palace: int = 1
    log_level: str = 'INFO'
    cache_max_size: int = 1024
    cache_ttl: int = 3600

    def __post_init__(self):
        if self.month_basis not in (MONTH_BASIS_LUNAR, MONTH_BASIS_SOLAR):
            raise ValueError(f"month_basis 必须为 lunar 或 solar: {self.month_basis}")
        if self.min_year > self.max_year:
            raise ValueError(f"min_year({self.min_year}) 不能大于 max_year({self.max_year})")
        if not 1 <= self.annual_flow_base_palace <= 12:
            raise ValueError(f"annual_flow_base_palace 必须在 1-12: {self.annual_flow_base_palace}")

    @classmethod
    def from_env(cls) -> 'ZiweiConfig':
        """从环境变量创建配置"""
        return cls(
            min_year=_get_int('ZIWEI_MIN_YEAR', 1900),
            max_year=_get_int('ZIWEI_MAX_YEAR', 2100),
            month_basis=os.getenv('ZIWEI_MONTH_BASIS', MONTH_BASIS_LUNAR).lower(),
            annual_flow_base_year=_get_int('ZIWEI_ANNUAL_FLOW_BASE_YEAR', 2013),
            annual_flow_base_palace=_get_int('ZIWEI_ANNUAL_FLOW_BASE_PALACE', 1),
            log_level=os.getenv('ZIWEI_LOG_LEVEL', 'INFO').upper(),
            cache_max_size=_get_int('ZIWEI_CACHE_MAX_SIZE', 1024),
            cache_ttl=_get_int('ZIWEI_CACHE_TTL', 3600),
        )


# 全局配置实例（单例模式）
_config: Optional[ZiweiConfig] = None


def get_config() -> ZiweiConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        load_env_file()
        _config = ZiweiConfig.from_env()
    return _config


def reset_config():
    """清除全局配置（测试用）"""
    global _config
    _config = None
