"""
错误消息处理工具函数
"""

from __future__ import annotations


def extract_error_message(error: BaseException) -> str:
    """
    从异常中提取错误消息

    部分异常的 str() 为空（如 httpx 超时异常），此时回退到 repr()。

    Args:
        error: 异常对象

    Returns:
        错误消息字符串
    """
    return str(error) or repr(error)


def describe_error(error: BaseException) -> str:
    """返回 "类型名: 消息" 形式的描述，用于日志"""
    return f"{type(error).__name__}: {extract_error_message(error)}"
