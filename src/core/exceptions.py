"""
fetch 编排相关异常

所有由编排器自身产生的异常都继承 FetchError，携带:
- kind: 稳定的错误类型标识（如 plugin-error-request-will-fetch）
- details: 结构化上下文（thrownError / pluginName 等），不做字符串化

传输层抛出的异常（DispatchError）和 fetch_did_fail 钩子抛出的异常
不会被包装，原样传递给调用方。
"""

from __future__ import annotations

from typing import Any

from src.core.messages import format_message

PLUGIN_ERROR_REQUEST_WILL_FETCH = "plugin-error-request-will-fetch"
INVALID_FETCH_INPUT = "invalid-fetch-input"
INVALID_REQUEST_WILL_FETCH_RESULT = "invalid-request-will-fetch-result"


class FetchError(Exception):
    """编排器错误基类"""

    def __init__(self, kind: str, details: dict[str, Any] | None = None):
        self.kind = kind
        self.details: dict[str, Any] = dict(details or {})
        super().__init__(format_message(kind, self.details))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, details={self.details!r})"


class PluginTransformError(FetchError):
    """request_will_fetch 钩子抛出异常，分发前终止"""

    def __init__(self, thrown_error: BaseException, *, plugin_name: str | None = None):
        details: dict[str, Any] = {"thrownError": thrown_error}
        if plugin_name:
            details["pluginName"] = plugin_name
        super().__init__(PLUGIN_ERROR_REQUEST_WILL_FETCH, details)

    @property
    def thrown_error(self) -> BaseException:
        return self.details["thrownError"]

    @property
    def plugin_name(self) -> str | None:
        return self.details.get("pluginName")


class InvalidFetchInputError(FetchError, TypeError):
    """fetch 输入既不是 URL 字符串也不是 FetchRequest"""

    def __init__(self, value: Any):
        super().__init__(INVALID_FETCH_INPUT, {"inputType": type(value).__name__})


class InvalidRequestWillFetchResultError(FetchError, TypeError):
    """request_will_fetch 钩子返回了无法识别的值"""

    def __init__(self, value: Any, *, plugin_name: str | None = None):
        details: dict[str, Any] = {"returnedType": type(value).__name__}
        if plugin_name:
            details["pluginName"] = plugin_name
        super().__init__(INVALID_REQUEST_WILL_FETCH_RESULT, details)
