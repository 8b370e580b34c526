# app/retrieval/similarity.py
from __future__ import annotations

from app.domain.contracts import WordSet


def jaccard(a: WordSet, b: WordSet) -> float:
    """|A ∩ B| / |A ∪ B|；任一为空集时定义为 0.0。"""
    if not a or not b:
        return 0.0
    inter = len(a & b)
    union = len(a | b)
    return inter / union
