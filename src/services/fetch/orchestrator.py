"""
fetch 编排器

一次 fetch 调用的流程：

    构建请求 -> request_will_fetch 钩子链 -> 网络分发 -> 成功返回
                                                   -> 失败: fetch_did_fail 钩子链 -> 重新抛出

约束：
- original_request 在整个调用期间不变，只有当前请求随钩子返回值推进
- 两条钩子链都按插件列表顺序依次 await，不并发执行
- 每次调用最多分发一次，不重试；构建或改写阶段失败时不分发
- fetch_did_fail 钩子只能观察失败，不能改变结果；钩子自身抛出的异常会中断后续钩子，
  并取代原始分发异常传递给调用方（原始异常保留在 __context__ 中）
"""

from __future__ import annotations

from typing import Any, Iterable

from src.clients.transport import HttpxTransport, Transport
from src.core.error_utils import describe_error
from src.core.exceptions import (
    InvalidFetchInputError,
    InvalidRequestWillFetchResultError,
    PluginTransformError,
)
from src.core.logger import logger
from src.models.fetch import FetchContext, FetchOptions, FetchRequest
from src.services.fetch.plugin_utils import (
    FETCH_DID_FAIL,
    REQUEST_WILL_FETCH,
    Plugin,
    call_hook,
    filter_plugins,
    get_plugin_name,
)
from src.utils.url_utils import redact_url_for_log


class FetchOrchestrator:
    """
    单次网络请求的插件编排器

    不持有任何跨调用的可变状态，同一实例可被并发调用。
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport()
        return self._transport

    async def fetch(
        self,
        input: FetchRequest | str,
        options: FetchOptions | None = None,
        plugins: Iterable[Plugin] | None = None,
        *,
        event: Any = None,
    ) -> Any:
        """
        执行一次 fetch

        Args:
            input: URL 字符串或已构建的 FetchRequest
            options: 透传给传输层的选项；input 为 FetchRequest 时忽略
            plugins: 有序插件列表，可为空
            event: 触发本次请求的事件对象，原样放入每个钩子上下文

        Returns:
            传输层返回的响应（不检查状态码）

        Raises:
            InvalidFetchInputError: input 无法构建为请求
            PluginTransformError: request_will_fetch 钩子抛出异常
            Exception: 传输层异常（原样），或 fetch_did_fail 钩子抛出的异常
        """
        plugin_list = list(plugins) if plugins else []

        original_request = self._build_request(input, options)
        # 预构建请求不使用 options
        dispatch_options = options if isinstance(input, str) else None

        request = await self._apply_request_will_fetch(original_request, plugin_list, event)

        logger.debug("分发请求: {} {}", request.method, redact_url_for_log(request.url))
        try:
            response = await self.transport(request, dispatch_options)
        except Exception as error:
            logger.warning(
                "网络请求失败: {} {} ({})",
                request.method,
                redact_url_for_log(request.url),
                describe_error(error),
            )
            failure_context = FetchContext(
                original_request=original_request,
                request=request,
                error=error,
                event=event,
            )
            await self._notify_fetch_did_fail(failure_context, plugin_list)
            raise

        return response

    def _build_request(self, input: Any, options: FetchOptions | None) -> FetchRequest:
        if isinstance(input, FetchRequest):
            return input
        if isinstance(input, str):
            return FetchRequest.from_url(input, options)
        raise InvalidFetchInputError(input)

    async def _apply_request_will_fetch(
        self,
        original_request: FetchRequest,
        plugins: list[Plugin],
        event: Any,
    ) -> FetchRequest:
        request = original_request
        for plugin in filter_plugins(plugins, REQUEST_WILL_FETCH):
            plugin_name = get_plugin_name(plugin)
            context = FetchContext(
                original_request=original_request,
                request=request,
                event=event,
            )
            try:
                result = await call_hook(plugin, REQUEST_WILL_FETCH, context)
                request = self._coerce_request(result, request, plugin_name)
            except Exception as error:
                logger.warning(
                    "插件 {} 的 request_will_fetch 钩子异常，终止请求: {}",
                    plugin_name or "<anonymous>",
                    describe_error(error),
                )
                raise PluginTransformError(error, plugin_name=plugin_name) from error

            if request is not context.request:
                logger.debug(
                    "插件 {} 改写请求: {}",
                    plugin_name or "<anonymous>",
                    redact_url_for_log(request.url),
                )
        return request

    @staticmethod
    def _coerce_request(
        result: Any, current: FetchRequest, plugin_name: str | None
    ) -> FetchRequest:
        if result is None:
            return current
        if isinstance(result, FetchRequest):
            return result
        if isinstance(result, str):
            return current.with_url(result)
        raise InvalidRequestWillFetchResultError(result, plugin_name=plugin_name)

    async def _notify_fetch_did_fail(self, context: FetchContext, plugins: list[Plugin]) -> None:
        # 逐个 await：前一个钩子完成后才调用下一个，钩子异常直接向上传递
        for plugin in filter_plugins(plugins, FETCH_DID_FAIL):
            logger.debug("调用插件 {} 的 fetch_did_fail 钩子", get_plugin_name(plugin) or "<anonymous>")
            await call_hook(plugin, FETCH_DID_FAIL, context)


_default_orchestrator: FetchOrchestrator | None = None


def get_fetch_orchestrator() -> FetchOrchestrator:
    """获取使用默认传输层的全局编排器"""
    global _default_orchestrator
    if _default_orchestrator is None:
        _default_orchestrator = FetchOrchestrator()
    return _default_orchestrator


async def fetch(
    input: FetchRequest | str,
    options: FetchOptions | None = None,
    plugins: Iterable[Plugin] | None = None,
    *,
    event: Any = None,
) -> Any:
    """使用默认编排器执行 fetch 的便捷函数"""
    return await get_fetch_orchestrator().fetch(input, options, plugins, event=event)
