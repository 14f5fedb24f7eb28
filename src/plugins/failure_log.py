"""
失败记录插件
"""

from __future__ import annotations

from src.core.error_utils import describe_error
from src.core.logger import logger
from src.models.fetch import FetchContext
from src.utils.url_utils import redact_url_for_log


class FailureLogPlugin:
    """在 fetch_did_fail 阶段记录失败请求，并累计失败次数"""

    name = "failure-log"

    def __init__(self, level: str = "WARNING") -> None:
        self.level = level.upper()
        self.failure_count = 0

    def fetch_did_fail(self, context: FetchContext) -> None:
        self.failure_count += 1
        original_url = redact_url_for_log(context.original_request.url)
        current_url = redact_url_for_log(context.request.url)
        error = describe_error(context.error) if context.error is not None else "unknown"
        if original_url == current_url:
            logger.log(self.level, "请求失败: {} {} ({})", context.request.method, current_url, error)
        else:
            logger.log(
                self.level,
                "请求失败: {} {} (原始 URL: {}) ({})",
                context.request.method,
                current_url,
                original_url,
                error,
            )
