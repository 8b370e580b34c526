from app.retrieval.similarity import jaccard


def test_identical_sets_score_one():
    a = frozenset({"quick", "brown", "fox"})
    assert jaccard(a, a) == 1.0


def test_disjoint_sets_score_zero():
    assert jaccard(frozenset({"a", "b"}), frozenset({"c", "d"})) == 0.0


def test_empty_sets_score_zero():
    assert jaccard(frozenset(), frozenset()) == 0.0
    assert jaccard(frozenset(), frozenset({"a"})) == 0.0
    assert jaccard(frozenset({"a"}), frozenset()) == 0.0


def test_partial_overlap():
    # 交集 2，并集 4
    assert jaccard(frozenset({"a", "b", "c"}), frozenset({"b", "c", "d"})) == 0.5


def test_symmetric():
    a = frozenset({"data", "structures", "are"})
    b = frozenset({"data", "science", "is", "fun"})
    assert jaccard(a, b) == jaccard(b, a) == 1 / 6
