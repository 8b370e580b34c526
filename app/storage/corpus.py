# app/storage/corpus.py
"""
参考语料：进程启动时构建一次，之后只读，不做重新加载。
- 未配置 CORPUS_PATH：使用内置的五条参考文本
- .jsonl：每行一个对象，必须有 text，可选 id
- 其他扩展名：一行一条参考文本
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from app.core.settings import get_settings
from app.domain.contracts import ReferenceCorpus, ReferenceDocument
from app.retrieval.keyword import tokenize

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_TEXTS: Tuple[str, ...] = (
    "The quick brown fox jumps over the lazy dog. This is a classic sentence used for typography samples.",
    "Java is a high-level, class-based, object-oriented programming language that is designed to have "
    "as few implementation dependencies as possible.",
    "Machine learning is a field of inquiry devoted to understanding and building methods that 'learn', "
    "that is, methods that leverage data to improve performance on some set of tasks.",
    "The World Wide Web, commonly known as the Web, is an information system where documents and other "
    "web resources are identified by Uniform Resource Locators.",
    "Data structures are a way of organizing and storing data in a computer so that it can be accessed "
    "and modified efficiently.",
)


def _default_id(index: int) -> str:
    return f"ref_{index}"


def build_corpus(texts: Iterable[str | Tuple[str, str]]) -> ReferenceCorpus:
    """每条文本只分词一次。元素可以是 text，也可以是 (doc_id, text)。"""
    docs: List[ReferenceDocument] = []
    for i, item in enumerate(texts):
        if isinstance(item, tuple):
            doc_id, text = item
        else:
            doc_id, text = _default_id(i), item
        docs.append(ReferenceDocument(doc_id=doc_id, text=text, words=tokenize(text)))
    return ReferenceCorpus(documents=tuple(docs))


def _read_jsonl(path: Path) -> List[Tuple[str, str]]:
    items: List[Tuple[str, str]] = []
    with path.open("r", encoding="utf-8-sig") as f:
        for ln, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"corpus jsonl parse error @ {path.name}:{ln}: {e}") from e
            if not isinstance(obj, dict) or not isinstance(obj.get("text"), str):
                raise ValueError(f"corpus entry without text @ {path.name}:{ln}")
            raw_id = obj.get("id")
            doc_id = str(raw_id) if raw_id is not None else _default_id(len(items))
            items.append((doc_id, obj["text"]))
    return items


def _read_lines(path: Path) -> List[Tuple[str, str]]:
    items: List[Tuple[str, str]] = []
    with path.open("r", encoding="utf-8-sig") as f:
        for line in f:
            line = line.strip()
            if line:
                items.append((_default_id(len(items)), line))
    return items


def load_corpus(path: Optional[str | Path] = None) -> ReferenceCorpus:
    """path 为空时返回内置语料；文件不存在直接抛 FileNotFoundError（启动即失败）。"""
    if not path:
        corpus = build_corpus(DEFAULT_REFERENCE_TEXTS)
        logger.info("reference corpus: built-in, %d documents", len(corpus))
        return corpus

    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"corpus file not found: {p}")
    items = _read_jsonl(p) if p.suffix.lower() == ".jsonl" else _read_lines(p)
    corpus = build_corpus(items)
    if not len(corpus):
        logger.warning("reference corpus %s is empty; every check will score 0.0", p)
    else:
        logger.info("reference corpus: %s, %d documents", p, len(corpus))
    return corpus


def load_corpus_from_settings() -> ReferenceCorpus:
    return load_corpus(get_settings().CORPUS_PATH)
