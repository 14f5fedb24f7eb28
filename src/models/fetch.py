"""
fetch 编排使用的数据模型

- FetchRequest: 不可变的请求描述，插件只能返回新实例替换它
- FetchContext: 每次钩子调用时传入的上下文
- FetchOptions: 透传给传输层的选项（对编排器不透明）
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx

FetchOptions = Mapping[str, Any]

HeaderTypes = httpx.Headers | Mapping[str, str] | Sequence[tuple[str, str]] | None


@dataclass(frozen=True, init=False)
class FetchRequest:
    """
    待发送的网络请求

    请求头以 (小写键名, 值) 元组保存，headers 属性每次返回新的 httpx.Headers 副本，
    修改副本不会影响本请求，也不会影响共享同一请求的其它上下文。
    """

    url: str
    method: str
    header_items: tuple[tuple[str, str], ...]
    body: bytes | str | None

    def __init__(
        self,
        url: str,
        method: str = "GET",
        headers: HeaderTypes = None,
        body: bytes | str | None = None,
    ) -> None:
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "method", str(method).upper())
        object.__setattr__(self, "header_items", tuple(httpx.Headers(headers).multi_items()))
        object.__setattr__(self, "body", body)

    @property
    def headers(self) -> httpx.Headers:
        return httpx.Headers(list(self.header_items))

    @classmethod
    def from_url(cls, url: str, options: FetchOptions | None = None) -> "FetchRequest":
        """用 URL + 选项构建请求，选项中仅 method / headers / body 参与构建"""
        options = options or {}
        return cls(
            url=url,
            method=options.get("method") or "GET",
            headers=options.get("headers"),
            body=options.get("body"),
        )

    def replace(self, **changes: Any) -> "FetchRequest":
        """返回修改了指定字段的新请求，可修改 url / method / headers / body"""
        values: dict[str, Any] = {
            "url": self.url,
            "method": self.method,
            "headers": self.header_items,
            "body": self.body,
        }
        values.update(changes)
        return type(self)(**values)

    def with_url(self, url: str) -> "FetchRequest":
        return self.replace(url=url)

    def with_headers(self, headers: HeaderTypes, *, overwrite: bool = True) -> "FetchRequest":
        """
        合并请求头并返回新请求，多值请求头的每个值都会保留

        Args:
            headers: 需要合并的请求头
            overwrite: False 时保留已存在的同名请求头
        """
        incoming = httpx.Headers(headers).multi_items()
        incoming_keys = {key for key, _ in incoming}
        existing_keys = {key for key, _ in self.header_items}

        if overwrite:
            items = [item for item in self.header_items if item[0] not in incoming_keys]
            items.extend(incoming)
        else:
            items = list(self.header_items)
            items.extend(item for item in incoming if item[0] not in existing_keys)
        return self.replace(headers=items)


@dataclass(frozen=True)
class FetchContext:
    """
    钩子上下文

    original_request 在一次 fetch 调用内始终不变；request 为当前（可能已被改写的）请求；
    error 仅在 fetch_did_fail 阶段存在。
    """

    original_request: FetchRequest
    request: FetchRequest
    error: BaseException | None = None
    event: Any = None


__all__ = ["FetchContext", "FetchOptions", "FetchRequest", "HeaderTypes"]
