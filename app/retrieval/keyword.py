# app/retrieval/keyword.py
"""
关键词层的最小工具：
- tokenize：小写 → 删除非 [a-z0-9空白] 字符 → 按空白切分 → 去重成集合
注意是“删除”而不是替换成分隔符：don't -> dont，state-of-the-art -> stateoftheart。
非 ASCII 字母（如 é）和非 ASCII 空白（如 NBSP）同样被删除，前后的词会连在一起。
"""
from __future__ import annotations
import re

from app.domain.contracts import WordSet

_NON_WORD = re.compile(r"[^a-z0-9\s]", re.ASCII)


def tokenize(text: str) -> WordSet:
    t = (text or "").lower()
    t = _NON_WORD.sub("", t)
    return frozenset(tok for tok in t.split() if tok)
