#!/usr/bin/env python3
"""
priceswap - 代币价格表与兑换计算
启动脚本
"""

import argparse

from loguru import logger

from priceswap.core.logging import configure_logging


def run_cli_mode(argv: list[str]):
    """运行命令行模式"""
    from priceswap.cli import app

    app(args=argv, prog_name="priceswap")


def run_library_mode(amount: str):
    """运行库模式示例"""
    import priceswap

    try:
        table = priceswap.get()
    except priceswap.PriceTableUnavailableError as e:
        logger.error("获取价格表失败: {}", e)
        return

    logger.success("成功获取价格表: {} 个代币", len(table))

    session = priceswap.SwapSession.start(table).with_amount(amount)
    quote = session.quote
    logger.info("{} {} -> {} {}", amount, quote.from_symbol, quote.output_display, quote.to_symbol)
    logger.info("汇率: {}", quote.rate_label())

    try:
        confirmation = session.submit()
    except priceswap.SwapValidationError as e:
        logger.warning("兑换请求无效: {}", e)
        return
    logger.success(confirmation.message)


def main():
    """主入口函数"""
    import priceswap

    logging_config = priceswap.get_config().logging
    configure_logging(
        level=logging_config.level,
        file_output=logging_config.file is not None,
        file_path=logging_config.file,
    )

    parser = argparse.ArgumentParser(description="priceswap - 代币价格表与兑换计算")
    parser.add_argument(
        "mode",
        choices=["cli", "library"],
        help="运行模式: cli(命令行), 或 library(库模式示例)",
    )
    parser.add_argument("--amount", default="1", help="库模式示例中兑换的数量")
    args, rest = parser.parse_known_args()

    logger.info("启动 priceswap - 模式: {}", args.mode)

    if args.mode == "cli":
        run_cli_mode(rest)
    elif args.mode == "library":
        run_library_mode(args.amount)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
