import pytest

from app.domain.contracts import RiskLevel
from app.retrieval.classify import MESSAGES, classify


@pytest.mark.parametrize("percentage, level", [
    (100.0, RiskLevel.high),
    (70.0, RiskLevel.high),
    (69.999, RiskLevel.moderate),
    (40.0, RiskLevel.moderate),
    (39.999, RiskLevel.low),
    (10.0, RiskLevel.low),
    (9.999, RiskLevel.minimal),
    (0.0, RiskLevel.minimal),
])
def test_bands(percentage, level):
    v = classify(percentage)
    assert v.level is level
    assert v.message == MESSAGES[level]
    assert v.percentage == percentage


def test_every_value_lands_in_exactly_one_band():
    levels = {classify(i / 10).level for i in range(0, 1001)}
    assert levels == set(RiskLevel)


def test_messages():
    assert classify(85.0).message.startswith("A high degree of similarity was found.")
    assert classify(50.0).message.startswith("Moderate similarity detected.")
    assert classify(20.0).message.startswith("Some similarities were found")
    assert classify(0.0).message.startswith("The text appears to be largely original")
