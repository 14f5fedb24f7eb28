"""
URL 改写插件
"""

from __future__ import annotations

from typing import Callable, Mapping

from src.models.fetch import FetchContext, FetchRequest


class UrlRewritePlugin:
    """
    分发前改写请求 URL

    rewrite 支持两种形式：
    - 可调用对象: url -> 新 url（返回 None 表示不改写）
    - 前缀映射: {"/api/": "https://api.example.com/"}，按插入顺序匹配第一个前缀
    """

    name = "url-rewrite"

    def __init__(self, rewrite: Callable[[str], str | None] | Mapping[str, str]) -> None:
        if callable(rewrite):
            self._rewrite = rewrite
        else:
            prefixes = dict(rewrite)
            self._rewrite = lambda url: _rewrite_prefix(url, prefixes)

    def request_will_fetch(self, context: FetchContext) -> FetchRequest | None:
        new_url = self._rewrite(context.request.url)
        if new_url is None or new_url == context.request.url:
            return None
        return context.request.with_url(new_url)


def _rewrite_prefix(url: str, prefixes: dict[str, str]) -> str | None:
    for old, new in prefixes.items():
        if url.startswith(old):
            return new + url[len(old):]
    return None
