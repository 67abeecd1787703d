"""
CLI 模块

命令行接口实现。
"""

import asyncio
from typing import Optional

import click
from loguru import logger

from cursetool import __version__
from cursetool.dispatcher import Dispatcher, Mode
from cursetool.exceptions import CursetoolError
from cursetool.logger import setup_logger
from cursetool.utils import get_config


async def run_async(
    mode: str, input_path: str, output_path: str, config_path: Optional[str]
):
    """异步运行"""
    try:
        # 模式必须在任何文件操作之前校验
        parsed_mode = Mode.parse(mode)
        config = get_config(config_path)
        dispatcher = Dispatcher(config)
        await dispatcher.run(parsed_mode, input_path, output_path)
    except CursetoolError as e:
        if e.context:
            logger.debug(f"错误上下文: {e.context}")
        message = str(e)
        path = e.context.get("path")
        if path and path not in message:
            message = f"{message}（文件: {path}）"
        error = click.ClickException(message)
        error.exit_code = e.exit_code
        raise error from e


@click.command()
@click.argument("mode", metavar="MODE")
@click.argument("input_path", metavar="INPUT", type=click.Path())
@click.argument("output_path", metavar="OUTPUT", type=click.Path())
@click.option(
    "-c", "--config", "config_path", type=click.Path(), help="配置文件路径 (toml/json/yaml)"
)
@click.option("--debug", is_flag=True, help="启用调试模式")
@click.version_option(version=__version__)
def main(
    mode: str,
    input_path: str,
    output_path: str,
    config_path: Optional[str],
    debug: bool,
):
    """cursetool - 模组清单转换工具

    \b
    MODE 为 curse 时: 将 Curse manifest.json 转换为 YAML 清单
    MODE 为 yaml 时:  将 YAML 清单转换为 Nix 表达式
    """
    setup_logger(level="DEBUG" if debug else None)
    asyncio.run(run_async(mode, input_path, output_path, config_path))


if __name__ == "__main__":
    main()
