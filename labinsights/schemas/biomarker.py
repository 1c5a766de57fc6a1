from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    OPTIMAL = "optimal"
    NORMAL = "normal"
    BORDERLINE = "borderline"
    HIGH = "high"
    LOW = "low"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class Polarity(str, Enum):
    LOWER_IS_BETTER = "lower_is_better"
    HIGHER_IS_BETTER = "higher_is_better"


class BiomarkerReading(BaseModel):
    """A single lab result as supplied by the data layer.

    ``status`` and ``trend`` are plain strings rather than enums so that values
    outside the known set reach the classifier's fallback branches instead of
    being rejected at validation time.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Stable biomarker identifier, e.g. 'glucose'")
    name: str = ""
    unit: str = ""
    last_updated: str = Field(default="", alias="lastUpdated")
    value: float
    status: str
    trend: str
    trend_percent: float = Field(default=0.0, alias="trendPercent")


class BiomarkerDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_color: str
    status_badge: str
    polarity: Polarity
    is_good_trend: bool
    trend_color: str
    trend_label: str
    trend_icon: str
    show_trend_percent: bool
    trend_percent_text: str | None


class ClassifiedReading(BaseModel):
    reading: BiomarkerReading
    descriptor: BiomarkerDescriptor


class BiomarkerReference(BaseModel):
    """Educational content shown alongside a lab result."""
    biomarker_id: str
    description: str
    normal_range: str
    optimal_range: str
    what_it_means: str
    recommendations: list[str]
    risk_factors: list[str]


class PolarityResponse(BaseModel):
    lower_is_better: list[str]
