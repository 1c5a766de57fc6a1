from labinsights.services.biomarker_classifier import BiomarkerClassifier
from labinsights.services.polarity import default_polarity_table
from labinsights.services.score_bands import ScoreBandClassifier


def get_biomarker_classifier() -> BiomarkerClassifier:
    return BiomarkerClassifier(default_polarity_table())


def get_score_classifier() -> ScoreBandClassifier:
    return ScoreBandClassifier()
