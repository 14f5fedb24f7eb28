"""
请求头注入插件（认证信息等）
"""

from __future__ import annotations

from typing import Callable

import httpx

from src.models.fetch import FetchContext, FetchRequest, HeaderTypes


class HeaderInjectionPlugin:
    """
    在分发前向请求注入请求头

    headers 可以是固定的请求头，也可以是返回请求头的可调用对象
    （如每次请求时读取最新 token）。
    """

    name = "header-injection"

    def __init__(
        self,
        headers: HeaderTypes | Callable[[], HeaderTypes],
        *,
        overwrite: bool = True,
    ) -> None:
        self._headers = headers
        self.overwrite = overwrite

    def _resolve_headers(self) -> httpx.Headers:
        headers = self._headers() if callable(self._headers) else self._headers
        return httpx.Headers(headers)

    def request_will_fetch(self, context: FetchContext) -> FetchRequest:
        return context.request.with_headers(self._resolve_headers(), overwrite=self.overwrite)


class BearerAuthPlugin(HeaderInjectionPlugin):
    """注入 Authorization: Bearer <token>"""

    name = "bearer-auth"

    def __init__(self, token: str | Callable[[], str]) -> None:
        def _headers() -> dict[str, str]:
            value = token() if callable(token) else token
            return {"Authorization": f"Bearer {value}"}

        super().__init__(_headers, overwrite=True)
