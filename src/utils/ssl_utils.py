"""
SSL 上下文工具
"""

from __future__ import annotations

import ssl
from functools import lru_cache

import certifi


@lru_cache(maxsize=1)
def get_ssl_context() -> ssl.SSLContext:
    """获取基于 certifi 证书库的 SSL 上下文（进程内复用）"""
    return ssl.create_default_context(cafile=certifi.where())


def get_verify_option(verify: bool) -> ssl.SSLContext | bool:
    """返回 httpx verify 参数：启用时使用 certifi 上下文，关闭时返回 False"""
    return get_ssl_context() if verify else False
