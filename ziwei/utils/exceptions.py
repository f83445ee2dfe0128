#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘异常定义

结构性错误（天干地支、五行局、紫微、主星）直接中止排盘；
注释性错误（四化、自化、对宫化的星名匹配）按条目记录日志后跳过。
"""


class ZiweiError(Exception):
    """
    排盘异常基类

    与系统错误区分开来，携带错误码和错误类型供服务层组装响应。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "ziwei_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class InputRangeError(ZiweiError, ValueError):
    """输入超出支持范围（年份、月份、时辰等）"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        error_type = f"input_range_error:{field}" if field else "input_range_error"
        super().__init__(message, code=400, error_type=error_type)


class DateRangeError(InputRangeError):
    """年份超出历法转换支持范围"""
    def __init__(self, year: int, min_year: int, max_year: int):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(f"年份 {year} 超出支持范围 {min_year}-{max_year}", field="year")


class LookupMissError(ZiweiError, LookupError):
    """查表未命中，说明上游计算有误"""
    def __init__(self, message: str, table: str = None):
        self.table = table
        super().__init__(message, code=500, error_type="lookup_miss")


class StarResolutionAmbiguity(ZiweiError, LookupError):
    """星名精确、归一化、子串三级匹配均未命中"""
    def __init__(self, star_name: str):
        self.star_name = star_name
        super().__init__(f"未找到星曜: {star_name}", code=500, error_type="star_resolution")


class CalendarConversionDegraded(ZiweiError):
    """农历转换失败（严格模式下抛出，默认返回“未知”占位）"""
    def __init__(self, year: int, month: int, day: int, reason: str = ""):
        self.year = year
        self.month = month
        self.day = day
        message = f"农历转换失败: {year}-{month:02d}-{day:02d}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code=500, error_type="calendar_degraded")
