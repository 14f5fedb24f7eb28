"""
运行时配置

所有配置项均从环境变量读取，进程内通过 `from src.config import config` 访问。
仅影响默认传输层（HTTPClientPool / HttpxTransport），编排器本身无配置。
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """HTTP 传输层配置"""

    model_config = ConfigDict(frozen=True)

    # 超时（秒），由 httpx 在传输层执行
    http_connect_timeout: float = Field(default=10.0, gt=0)
    http_read_timeout: float = Field(default=60.0, gt=0)
    http_write_timeout: float = Field(default=60.0, gt=0)
    http_pool_timeout: float = Field(default=10.0, gt=0)

    # 连接池
    http_max_connections: int = Field(default=100, gt=0)
    http_keepalive_connections: int = Field(default=20, ge=0)
    http_keepalive_expiry: float = Field(default=30.0, gt=0)

    # 出站代理（可选）
    http_proxy_url: str | None = None
    http_proxy_username: str | None = None
    http_proxy_password: str | None = None

    http_verify_ssl: bool = True

    @field_validator("http_proxy_url", "http_proxy_username", "http_proxy_password")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """从环境变量构建配置，未设置的项使用默认值"""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = env.get(name.upper())
            if raw is None:
                continue
            if name == "http_verify_ssl":
                values[name] = raw.strip().lower() in _TRUE_VALUES
            else:
                values[name] = raw
        return cls(**values)

    def proxy_config(self) -> dict[str, Any] | None:
        """转换为 build_proxy_url 可用的代理配置字典"""
        if not self.http_proxy_url:
            return None
        return {
            "url": self.http_proxy_url,
            "username": self.http_proxy_username,
            "password": self.http_proxy_password,
            "enabled": True,
        }
