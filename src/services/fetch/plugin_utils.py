"""
插件工具函数

插件可以是任意对象（或 dict），每个钩子都是可选的，调用时按名称动态检测。
钩子既可以是普通函数，也可以是协程函数。
"""

from __future__ import annotations

import inspect
from types import SimpleNamespace
from typing import Any, Callable, Iterable, Mapping, Protocol, runtime_checkable

from src.models.fetch import FetchContext, FetchRequest

REQUEST_WILL_FETCH = "request_will_fetch"
FETCH_DID_FAIL = "fetch_did_fail"


@runtime_checkable
class RequestWillFetchPlugin(Protocol):
    def request_will_fetch(self, context: FetchContext) -> FetchRequest | str | None:
        ...


@runtime_checkable
class FetchDidFailPlugin(Protocol):
    def fetch_did_fail(self, context: FetchContext) -> None:
        ...


# 插件可以实现任意一个或多个钩子，也可以是 {钩子名: 可调用对象} 形式的 dict
Plugin = RequestWillFetchPlugin | FetchDidFailPlugin | Mapping[str, Any]


def get_hook(plugin: Plugin, hook: str) -> Callable[..., Any] | None:
    """获取插件上的钩子，不存在或不可调用时返回 None"""
    if isinstance(plugin, Mapping):
        candidate = plugin.get(hook)
    else:
        candidate = getattr(plugin, hook, None)
    return candidate if callable(candidate) else None


def filter_plugins(plugins: Iterable[Plugin] | None, hook: str) -> list[Plugin]:
    """按原顺序筛选出实现了指定钩子的插件"""
    if not plugins:
        return []
    return [plugin for plugin in plugins if get_hook(plugin, hook) is not None]


def get_plugin_name(plugin: Plugin) -> str | None:
    """
    获取插件名称

    优先使用插件的 name 属性；匿名插件（dict / SimpleNamespace）无名称时返回 None，
    其它对象回退到类名。
    """
    if isinstance(plugin, Mapping):
        name = plugin.get("name")
    else:
        name = getattr(plugin, "name", None)
    if isinstance(name, str) and name:
        return name
    if isinstance(plugin, (Mapping, SimpleNamespace)):
        return None
    return type(plugin).__name__


async def call_hook(plugin: Plugin, hook: str, context: FetchContext) -> Any:
    """调用钩子，返回值为 awaitable 时等待其完成"""
    func = get_hook(plugin, hook)
    if func is None:
        return None
    result = func(context)
    if inspect.isawaitable(result):
        result = await result
    return result
