# app/services/check_service.py
from __future__ import annotations

import logging

from app.core.settings import get_settings
from app.domain.contracts import ReferenceCorpus, ReferenceDocument, Verdict
from app.retrieval.classify import classify
from app.retrieval.keyword import tokenize
from app.retrieval.matcher import best_match_document
from app.storage.corpus import load_corpus_from_settings

logger = logging.getLogger(__name__)


def _preview(text: str, limit: int) -> str:
    p = (text or "").strip().replace("\n", " ")
    if len(p) > limit:
        p = p[:limit] + "…"
    return p


class CheckService:
    """提交文本 → 分词 → 语料最大相似度 → 分级结论。语料只读，可并发调用。"""

    def __init__(self, corpus: ReferenceCorpus, preview_chars: int = 120) -> None:
        self.corpus = corpus
        self.preview_chars = preview_chars

    def score(self, text: str) -> Verdict:
        words = tokenize(text)
        best, percentage = best_match_document(words, self.corpus)
        verdict = classify(percentage)
        logger.debug(
            "check: tokens=%d percentage=%.3f level=%s best=%s text=%r",
            len(words), percentage, verdict.level.value,
            best.doc_id if isinstance(best, ReferenceDocument) else None,
            _preview(text, self.preview_chars),
        )
        return verdict


# 全局单例（按需初始化）
_service: CheckService | None = None


def get_check_service() -> CheckService:
    global _service
    if _service is None:
        s = get_settings()
        _service = CheckService(corpus=load_corpus_from_settings(), preview_chars=s.DEBUG_PREVIEW_CHARS)
    return _service


def score(text: str) -> Verdict:
    return get_check_service().score(text)
