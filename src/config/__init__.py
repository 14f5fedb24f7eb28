"""
配置模块
"""

from src.config.settings import Config

config = Config.from_env()

__all__ = ["Config", "config"]
