from fastapi import APIRouter, Depends

from labinsights.routers.deps import get_biomarker_classifier
from labinsights.schemas.biomarker import (
    BiomarkerReading,
    BiomarkerReference,
    ClassifiedReading,
    PolarityResponse,
)
from labinsights.services.biomarker_classifier import BiomarkerClassifier
from labinsights.services.reference import get_reference

router = APIRouter(prefix="/api/biomarkers", tags=["biomarkers"])


@router.post("/classify", response_model=ClassifiedReading)
def classify_reading(
    payload: BiomarkerReading,
    classifier: BiomarkerClassifier = Depends(get_biomarker_classifier),
):
    return ClassifiedReading(reading=payload, descriptor=classifier.classify(payload))


@router.post("/classify/batch", response_model=list[ClassifiedReading])
def classify_batch(
    payload: list[BiomarkerReading],
    classifier: BiomarkerClassifier = Depends(get_biomarker_classifier),
):
    descriptors = classifier.classify_many(payload)
    return [
        ClassifiedReading(reading=reading, descriptor=descriptor)
        for reading, descriptor in zip(payload, descriptors)
    ]


@router.get("/polarity", response_model=PolarityResponse)
def polarity(classifier: BiomarkerClassifier = Depends(get_biomarker_classifier)):
    return PolarityResponse(lower_is_better=list(classifier.polarity_table))


@router.get("/{biomarker_id}/reference", response_model=BiomarkerReference)
def reference(biomarker_id: str):
    return get_reference(biomarker_id)
