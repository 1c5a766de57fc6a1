from fastapi import APIRouter, Depends

from labinsights.routers.deps import get_score_classifier
from labinsights.schemas.score import ScoreRequest, ScoreSummary
from labinsights.services.score_bands import ScoreBandClassifier

router = APIRouter(prefix="/api/score", tags=["score"])


@router.post("/classify", response_model=ScoreSummary)
def classify_score(payload: ScoreRequest, classifier: ScoreBandClassifier = Depends(get_score_classifier)):
    return classifier.describe(payload.score)


@router.get("/{score}", response_model=ScoreSummary)
def score_summary(score: float, classifier: ScoreBandClassifier = Depends(get_score_classifier)):
    return classifier.describe(score)
