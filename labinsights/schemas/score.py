from pydantic import BaseModel, ConfigDict, Field


class ScoreRequest(BaseModel):
    score: int | float = Field(description="Aggregate health score, nominally 0-100")


class ScoreBand(BaseModel):
    """Color and label for the band an aggregate score falls into."""
    model_config = ConfigDict(frozen=True)

    color: str
    label: str


class ScoreSummary(BaseModel):
    """Everything the health-score display needs for a single score."""
    model_config = ConfigDict(frozen=True)

    score: int | float
    color: str
    label: str
    description: str
    comparison: str
    progress: float = Field(description="Score clamped to 0-100 and scaled to 0.0-1.0")
