"""
网络传输层

编排器只依赖 Transport 协议：接收 FetchRequest 与透传选项，返回响应或抛出异常。
HttpxTransport 是默认实现，基于 HTTPClientPool 中的 httpx.AsyncClient。
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from src.clients.http_client import HTTPClientPool
from src.core.logger import logger
from src.models.fetch import FetchOptions, FetchRequest
from src.utils.url_utils import redact_url_for_log


@runtime_checkable
class Transport(Protocol):
    """网络传输协议：一次调用即一次网络请求，不做重试"""

    async def __call__(self, request: FetchRequest, options: FetchOptions | None = None) -> Any:
        ...


class HttpxTransport:
    """
    基于 httpx 的默认传输实现

    识别的透传选项：
    - timeout: 单次请求超时（float 或 httpx.Timeout），缺省使用客户端配置
    - follow_redirects: 是否跟随重定向，缺省使用客户端配置
    - extensions: httpx 请求扩展

    其它选项（method/headers/body 等）已体现在 FetchRequest 中，此处忽略。
    HTTP 错误状态码不会抛出异常，响应原样返回。
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
    ) -> None:
        self._client = client
        self._base_url = httpx.URL(base_url) if base_url else None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await HTTPClientPool.get_default_client_async()

    def resolve_url(self, url: str) -> httpx.URL:
        """相对 URL 基于 base_url 解析，未配置 base_url 时原样返回"""
        if self._base_url is None:
            return httpx.URL(url)
        return self._base_url.join(url)

    async def __call__(
        self, request: FetchRequest, options: FetchOptions | None = None
    ) -> httpx.Response:
        options = options or {}
        client = await self._get_client()

        http_request = client.build_request(
            request.method,
            self.resolve_url(request.url),
            headers=request.headers,
            content=request.body,
            timeout=options.get("timeout", httpx.USE_CLIENT_DEFAULT),
            extensions=options.get("extensions"),
        )
        logger.debug("发送请求: {} {}", request.method, redact_url_for_log(str(http_request.url)))

        response = await client.send(
            http_request,
            follow_redirects=options.get("follow_redirects", httpx.USE_CLIENT_DEFAULT),
        )
        logger.debug(
            "收到响应: {} {} -> {}",
            request.method,
            redact_url_for_log(str(http_request.url)),
            response.status_code,
        )
        return response


__all__ = ["HttpxTransport", "Transport"]
