"""
Banding of the aggregate health score.

Thresholds apply to the raw score. Only ``progress`` clamps, so a score of 150
is EXCELLENT and renders a full ring.
"""

from typing import NamedTuple

from labinsights.schemas.score import ScoreBand, ScoreSummary
from labinsights.services import palette


class _Band(NamedTuple):
    lower_bound: float
    color: str
    label: str
    description: str
    comparison: str


# Evaluated in order, first match wins.
BANDS: tuple[_Band, ...] = (
    _Band(
        80,
        palette.SUCCESS,
        "EXCELLENT",
        "You're in the top 15% of users. Your health metrics are exceptional and you're maintaining excellent habits.",
        "Top 15%",
    ),
    _Band(
        65,
        palette.SUCCESS_LIGHT,
        "GOOD",
        "You're in the top 35% of users. Your health is good with room for improvement in specific areas.",
        "Top 35%",
    ),
    _Band(
        50,
        palette.WARNING,
        "FAIR",
        "You're in the middle 50% of users. Focus on improving sleep, activity, and stress management.",
        "Top 50%",
    ),
    _Band(
        35,
        palette.ALERT,
        "POOR",
        "You're in the bottom 25% of users. Consider consulting with healthcare professionals for guidance.",
        "Top 75%",
    ),
)

CRITICAL = _Band(
    float("-inf"),
    palette.DANGER,
    "CRITICAL",
    "You're in the bottom 10% of users. Immediate attention to health habits is recommended.",
    "Top 90%",
)


def _band_for(score: float) -> _Band:
    for band in BANDS:
        if score >= band.lower_bound:
            return band
    # Anything below 35, including NaN.
    return CRITICAL


def progress(score: float) -> float:
    return max(0, min(score, 100)) / 100


class ScoreBandClassifier:
    def classify(self, score: float) -> ScoreBand:
        band = _band_for(score)
        return ScoreBand(color=band.color, label=band.label)

    def describe(self, score: float) -> ScoreSummary:
        band = _band_for(score)
        return ScoreSummary(
            score=score,
            color=band.color,
            label=band.label,
            description=band.description,
            comparison=band.comparison,
            progress=progress(score),
        )
