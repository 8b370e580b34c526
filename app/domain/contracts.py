"""
contracts.py

领域模型（数据结构）+ 运行时配置。
相似度引擎各层（分词 / Jaccard / 语料匹配 / 分级）之间只通过这里的类型交互。
Python 版本：3.10+
依赖：pydantic>=2, pydantic-settings
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# =========================
# 配置
# =========================

class Settings(BaseSettings):
    """系统运行时配置（可由环境变量 / .env 覆盖）。"""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # —— 日志配置 ——
    LOG_LEVEL: str = "INFO"
    DEBUG_PREVIEW_CHARS: int = 120  # 日志里提交文本最多打印这么多字符

    # —— 参考语料 ——
    CORPUS_PATH: Optional[str] = None  # 为空时使用内置语料；.jsonl 或 一行一条的纯文本

    # —— 服务监听 ——
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ALLOW_ORIGINS: List[str] = ["*"]


# =========================
# 枚举与类型别名
# =========================

class RiskLevel(str, Enum):
    high = "high"
    moderate = "moderate"
    low = "low"
    minimal = "minimal"


DocID = str
WordSet = FrozenSet[str]


# =========================
# 核心数据模型
# =========================

class ReferenceDocument(BaseModel):
    """参考语料中的一条文档。启动时构建一次，之后只读。"""
    model_config = ConfigDict(frozen=True)

    doc_id: DocID
    text: str
    words: WordSet = frozenset()


class ReferenceCorpus(BaseModel):
    """有序、只读的参考语料；顺序即加载顺序。"""
    model_config = ConfigDict(frozen=True)

    documents: Tuple[ReferenceDocument, ...] = ()

    def __iter__(self):
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)


class Verdict(BaseModel):
    """一次检测的结论。percentage 保持全精度，只在序列化边界做四舍五入。"""
    model_config = ConfigDict(frozen=True)

    percentage: float = Field(ge=0.0, le=100.0)
    level: RiskLevel
    message: str


# =========================
# 接口：HTTP 层
# =========================

class CheckRequest(BaseModel):
    text: Optional[str] = None


class CheckResponse(BaseModel):
    percentage: float
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    references: int = 0
