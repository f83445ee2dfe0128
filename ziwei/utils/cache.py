#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
缓存工具模块 - 命盘结果缓存

缓存键为完整出生信息 (year, month, day, hour, gender)。
缓存中的命盘是不可变快照，取用时按需返回副本，绝不原地修改。
进程内共享，读写均在锁内完成；过期删除容忍条目已被并发删除。
"""

import hashlib
import threading
import time
from typing import Any, Optional

from ziwei.config import get_config


class ChartCache:
    """命盘计算结果缓存"""

    def __init__(self, max_size: int = 1024, ttl: int = 3600):
        """
        初始化缓存

        Args:
            max_size: 最大缓存条目数
            ttl: 缓存过期时间（秒），默认1小时
        """
        self.max_size = max_size
        self.ttl = ttl
        self._cache = {}
        self._cache_times = {}
        # 可重入锁
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    def _generate_key(self, year: int, month: int, day: int, hour: int, gender: str) -> str:
        """生成缓存键"""
        cache_str = f"{year:04d}-{month:02d}-{day:02d}:{hour:02d}:{gender}"
        return hashlib.md5(cache_str.encode()).hexdigest()

    def _discard(self, key: str):
        """删除条目（条目已不存在时忽略）"""
        self._cache.pop(key, None)
        self._cache_times.pop(key, None)

    def get(self, year: int, month: int, day: int, hour: int, gender: str) -> Optional[Any]:
        """
        从缓存获取结果

        Returns:
            缓存的结果，如果不存在或已过期则返回None
        """
        key = self._generate_key(year, month, day, hour, gender)

        with self._lock:
            cached_at = self._cache_times.get(key)
            if cached_at is None:
                self.misses += 1
                return None

            # 检查是否过期
            if time.time() - cached_at > self.ttl:
                self._discard(key)
                self.misses += 1
                return None

            value = self._cache.get(key)
            if value is None:
                self.misses += 1
                return None
            self.hits += 1
            return value

    def set(self, year: int, month: int, day: int, hour: int, gender: str, value: Any):
        """
        设置缓存

        Args:
            year: 公历年
            month: 公历月
            day: 公历日
            hour: 小时
            gender: 性别
            value: 要缓存的命盘
        """
        key = self._generate_key(year, month, day, hour, gender)

        with self._lock:
            # 如果缓存已满，删除最旧的条目
            if key not in self._cache and len(self._cache) >= self.max_size and self._cache_times:
                oldest_key = min(self._cache_times, key=self._cache_times.get)
                self._discard(oldest_key)

            self._cache[key] = value
            self._cache_times[key] = time.time()

    def clear(self):
        """清空缓存"""
        with self._lock:
            self._cache.clear()
            self._cache_times.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict:
        """获取缓存统计信息"""
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "ttl": self.ttl,
                "hits": self.hits,
                "misses": self.misses,
            }


_chart_cache: Optional[ChartCache] = None
_chart_cache_lock = threading.Lock()


def get_chart_cache() -> ChartCache:
    """全局缓存实例（按配置懒加载）"""
    global _chart_cache
    if _chart_cache is None:
        with _chart_cache_lock:
            if _chart_cache is None:
                config = get_config()
                _chart_cache = ChartCache(max_size=config.cache_max_size, ttl=config.cache_ttl)
    return _chart_cache
