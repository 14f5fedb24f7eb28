"""
统一日志系统 - 基于 loguru

本模块只导出 loguru 的 logger，导入时不添加/移除任何 sink，
不影响宿主应用已有的日志配置。需要本库自带的输出配置时显式调用 setup_logging()。

日志级别策略:
- DEBUG: 请求构建、插件钩子调用、分发过程
- INFO:  客户端池初始化/关闭等生命周期事件
- WARNING: 网络分发失败、插件异常
- ERROR: 需要关注的故障

使用方式:
    from src.core.logger import logger, setup_logging

    setup_logging()  # 应用启动时调用一次
    logger.debug("插件 {} 已改写请求", name)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT_DEV = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)

CONSOLE_FORMAT_PROD = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def _is_docker() -> bool:
    return (
        os.path.exists("/.dockerenv")
        or os.environ.get("DOCKER_CONTAINER", "false").lower() == "true"
    )


def setup_logging(
    level: str | None = None,
    *,
    log_dir: str | Path | None = None,
    file_logging: bool | None = None,
) -> list[int]:
    """
    配置控制台与文件日志输出

    会先移除 loguru 已有的 sink，因此只应由应用入口（或测试 conftest）调用。

    Args:
        level: 控制台日志级别，缺省读取 LOG_LEVEL（开发环境 DEBUG，容器环境 INFO）
        log_dir: 文件日志目录，缺省读取 LOG_DIR，再缺省为当前目录下的 logs/
        file_logging: 是否写文件日志，缺省读取 LOG_DISABLE_FILE

    Returns:
        新增 sink 的 id 列表
    """
    is_docker = _is_docker()
    if level is None:
        level = os.getenv("LOG_LEVEL", "DEBUG" if not is_docker else "INFO")
    level = level.upper()
    if file_logging is None:
        file_logging = os.getenv("LOG_DISABLE_FILE", "false").lower() != "true"

    logger.remove()
    sink_ids: list[int] = []

    if is_docker:
        # 容器环境：禁用 backtrace 和 diagnose，避免在日志中泄露请求体
        sink_ids.append(
            logger.add(
                sys.stdout,
                format=CONSOLE_FORMAT_PROD,
                level=level,
                colorize=False,
                backtrace=False,
                diagnose=False,
            )
        )
    else:
        sink_ids.append(
            logger.add(
                sys.stdout,
                format=CONSOLE_FORMAT_DEV,
                level=level,
                colorize=True,
            )
        )

    if file_logging:
        directory = Path(log_dir or os.getenv("LOG_DIR", "logs"))
        directory.mkdir(parents=True, exist_ok=True)

        # enqueue=False: 同步写入，避免 multiprocessing 信号量泄漏
        sink_ids.append(
            logger.add(
                directory / "relayfetch.log",
                format=FILE_FORMAT,
                level="DEBUG",
                rotation="50 MB",
                retention="14 days",
                compression="gz",
                enqueue=False,
                encoding="utf-8",
                catch=True,
                backtrace=not is_docker,
                diagnose=not is_docker,
            )
        )

    # httpx 自身的请求日志与本库的分发日志重复
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return sink_ids


__all__ = ["logger", "setup_logging"]
