"""
内置插件
"""

from src.plugins.failure_log import FailureLogPlugin
from src.plugins.headers import BearerAuthPlugin, HeaderInjectionPlugin
from src.plugins.rewrite import UrlRewritePlugin

__all__ = [
    "BearerAuthPlugin",
    "FailureLogPlugin",
    "HeaderInjectionPlugin",
    "UrlRewritePlugin",
]
