# app/retrieval/classify.py
from __future__ import annotations
from typing import List, Tuple

from app.domain.contracts import RiskLevel, Verdict

# —— 分级阈值（下界包含，从高到低匹配，第一条命中即返回） ——
HIGH_MIN = 70.0
MODERATE_MIN = 40.0
LOW_MIN = 10.0

MESSAGES = {
    RiskLevel.high: "A high degree of similarity was found. This text requires immediate "
                    "and thorough review for plagiarism.",
    RiskLevel.moderate: "Moderate similarity detected. It's recommended to review the text "
                        "for improperly cited sources or significant overlap.",
    RiskLevel.low: "Some similarities were found, but this may be due to common phrases "
                   "or standard terminology. A quick review is advised.",
    RiskLevel.minimal: "The text appears to be largely original with a very low-risk of "
                       "plagiarism. No significant matches were found in the database.",
}

_BANDS: List[Tuple[float, RiskLevel]] = [
    (HIGH_MIN, RiskLevel.high),
    (MODERATE_MIN, RiskLevel.moderate),
    (LOW_MIN, RiskLevel.low),
]


def risk_level(percentage: float) -> RiskLevel:
    for lower, level in _BANDS:
        if percentage >= lower:
            return level
    return RiskLevel.minimal


def classify(percentage: float) -> Verdict:
    level = risk_level(percentage)
    return Verdict(percentage=percentage, level=level, message=MESSAGES[level])
