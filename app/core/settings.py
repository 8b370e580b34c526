# app/core/settings.py
from functools import lru_cache

from app.domain.contracts import Settings


@lru_cache()
def get_settings() -> Settings:
    # 环境变量 / .env 覆盖（pydantic-settings 默认行为），进程内只读一次
    return Settings()


def reload_settings() -> Settings:
    """丢弃缓存重新读取配置；语料等按需单例不会跟着重建。"""
    get_settings.cache_clear()
    return get_settings()
