"""
fetch 编排模块
"""

from src.services.fetch.orchestrator import FetchOrchestrator, fetch, get_fetch_orchestrator
from src.services.fetch.plugin_utils import (
    FETCH_DID_FAIL,
    REQUEST_WILL_FETCH,
    FetchDidFailPlugin,
    Plugin,
    RequestWillFetchPlugin,
    call_hook,
    filter_plugins,
    get_plugin_name,
)

__all__ = [
    "FETCH_DID_FAIL",
    "FetchDidFailPlugin",
    "FetchOrchestrator",
    "Plugin",
    "REQUEST_WILL_FETCH",
    "RequestWillFetchPlugin",
    "call_hook",
    "fetch",
    "filter_plugins",
    "get_fetch_orchestrator",
    "get_plugin_name",
]
