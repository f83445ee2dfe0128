#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘命令行入口，输出 JSON。

用法:
  ziwei-chart --year 1999 --month 12 --day 14 --hour 9 --gender male
  ziwei-chart --year 1999 --month 12 --day 14 --hour 9 --gender male --target-year 2026 --analyze
  ziwei-chart --year 1999 --month 12 --day 14 --hour 9 --gender male --month-basis solar
"""

import sys
import json
import argparse
from dataclasses import replace

from pydantic import ValidationError

from ziwei.calculators.ziwei_calculator import ZiweiCalculator
from ziwei.calculators.ziwei_logging import setup_logging
from ziwei.config import get_config, MONTH_BASIS_LUNAR, MONTH_BASIS_SOLAR
from ziwei.services import ChartService
from ziwei.utils.exceptions import ZiweiError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="紫微斗数排盘")
    parser.add_argument("--year", type=int, required=True, help="公历年")
    parser.add_argument("--month", type=int, required=True, help="公历月")
    parser.add_argument("--day", type=int, required=True, help="公历日")
    parser.add_argument("--hour", type=int, required=True, help="出生小时 0-23")
    parser.add_argument("--gender", choices=["male", "female"], required=True, help="性别")
    parser.add_argument("--name", default="", help="姓名（仅展示）")
    parser.add_argument("--target-year", type=int, default=None, help="流年年份，默认当前年份")
    parser.add_argument(
        "--month-basis",
        choices=[MONTH_BASIS_LUNAR, MONTH_BASIS_SOLAR],
        default=None,
        help="命宫取月方式，默认读取配置",
    )
    parser.add_argument("--analyze", action="store_true", help="附带三宫评分、执行风格、财富密码")
    parser.add_argument("--indent", type=int, default=2, help="JSON 缩进")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(config.log_level)

    birth = {
        "year": args.year,
        "month": args.month,
        "day": args.day,
        "hour": args.hour,
        "gender": args.gender,
        "name": args.name,
    }
    try:
        if args.month_basis and args.month_basis != config.month_basis:
            # 临时取月方式不进全局缓存
            chart = ZiweiCalculator(birth, config=replace(config, month_basis=args.month_basis)).calculate(args.target_year)
        else:
            chart = ChartService.get_chart(birth, target_year=args.target_year)
    except ValidationError as e:
        print(f"参数错误: {e.errors()[0].get('msg')}", file=sys.stderr)
        return 2
    except ZiweiError as e:
        print(f"排盘失败: {e.message}", file=sys.stderr)
        return 1

    output = {"chart": chart.model_dump()}
    if args.analyze:
        output["analysis"] = ChartService.analyze_chart(chart)
    print(json.dumps(output, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
