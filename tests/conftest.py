import pytest

from app.storage.corpus import DEFAULT_REFERENCE_TEXTS, build_corpus


@pytest.fixture
def default_corpus():
    return build_corpus(DEFAULT_REFERENCE_TEXTS)


@pytest.fixture
def fox_corpus():
    """内置语料 + 一条与测试输入完全相同的句子。"""
    return build_corpus(DEFAULT_REFERENCE_TEXTS + ("The quick brown fox jumps over the lazy dog.",))
