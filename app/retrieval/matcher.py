# app/retrieval/matcher.py
"""
语料匹配：把提交文本的词集合与参考语料逐条做 Jaccard，取最大值（不是平均）。
- 输入为空集：直接返回 0.0，不扫描语料
- 语料条目词集合为空：跳过
- 并列最大值：保留先出现的那条（按加载顺序）
"""
from __future__ import annotations
from typing import Iterable, Optional, Tuple, Union

from app.domain.contracts import ReferenceDocument, WordSet
from app.retrieval.similarity import jaccard

CorpusEntry = Union[ReferenceDocument, WordSet]


def _words_of(entry: CorpusEntry) -> WordSet:
    if isinstance(entry, ReferenceDocument):
        return entry.words
    return entry


def best_match_document(words: WordSet, corpus: Iterable[CorpusEntry]) -> Tuple[Optional[CorpusEntry], float]:
    """返回 (命中的语料条目 或 None, 百分比 0~100)。"""
    if not words:
        return None, 0.0

    best: Optional[CorpusEntry] = None
    best_sim = 0.0
    for entry in corpus:
        ref_words = _words_of(entry)
        if not ref_words:
            continue
        sim = jaccard(words, ref_words)
        if sim > best_sim:
            best_sim = sim
            best = entry
    return best, best_sim * 100.0


def best_match(words: WordSet, corpus: Iterable[CorpusEntry]) -> float:
    _, percentage = best_match_document(words, corpus)
    return percentage
