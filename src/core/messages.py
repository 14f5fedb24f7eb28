"""
错误类型 (kind) 到错误消息的映射

每个 FetchError 都由 kind + details 构成，消息在构造时根据 details 生成，
details 本身原样保留供调用方检查。
"""

from __future__ import annotations

from typing import Any, Callable

from src.core.error_utils import extract_error_message

MessageGenerator = Callable[[dict[str, Any]], str]


def _plugin_label(details: dict[str, Any]) -> str:
    return details.get("pluginName") or "<anonymous>"


def _cause(details: dict[str, Any]) -> str:
    thrown = details.get("thrownError")
    if thrown is None:
        return "unknown error"
    return extract_error_message(thrown)


MESSAGES: dict[str, MessageGenerator] = {
    "plugin-error-request-will-fetch": lambda d: (
        f"An error was thrown by the request_will_fetch hook of plugin "
        f"'{_plugin_label(d)}': {_cause(d)}"
    ),
    "invalid-fetch-input": lambda d: (
        f"The fetch input must be a URL string or a FetchRequest, "
        f"got {d.get('inputType', 'None')}."
    ),
    "invalid-request-will-fetch-result": lambda d: (
        f"The request_will_fetch hook of plugin '{_plugin_label(d)}' must return a "
        f"FetchRequest, a URL string or None, got {d.get('returnedType')}."
    ),
}


def format_message(kind: str, details: dict[str, Any] | None = None) -> str:
    """根据 kind 生成错误消息，未知 kind 直接返回 kind 本身"""
    generator = MESSAGES.get(kind)
    if generator is None:
        return kind
    return generator(details or {})
