from labinsights.schemas.biomarker import (
    BiomarkerDescriptor,
    BiomarkerReading,
    BiomarkerReference,
    ClassifiedReading,
    Polarity,
    PolarityResponse,
    Status,
    Trend,
)
from labinsights.schemas.score import ScoreBand, ScoreRequest, ScoreSummary

__all__ = [
    "BiomarkerDescriptor",
    "BiomarkerReading",
    "BiomarkerReference",
    "ClassifiedReading",
    "Polarity",
    "PolarityResponse",
    "ScoreBand",
    "ScoreRequest",
    "ScoreSummary",
    "Status",
    "Trend",
]
