import logging

import pytest

from labinsights.schemas.biomarker import Polarity, Status, Trend
from labinsights.services import palette
from labinsights.services.biomarker_classifier import (
    STATUS_COLORS,
    TREND_ICONS,
    BiomarkerClassifier,
    format_trend_percent,
)
from labinsights.services.polarity import PolarityTable


@pytest.fixture()
def classifier():
    return BiomarkerClassifier(PolarityTable())


def test_every_status_and_trend_is_mapped():
    assert set(STATUS_COLORS) == {status.value for status in Status}
    assert set(TREND_ICONS) == {trend.value for trend in Trend}


@pytest.mark.parametrize(
    "status, color",
    [
        ("optimal", palette.SUCCESS),
        ("normal", palette.SUCCESS_LIGHT),
        ("borderline", palette.WARNING),
        ("high", palette.ALERT),
        ("low", palette.DANGER),
        ("critical", palette.NEUTRAL),
        ("", palette.NEUTRAL),
        ("OPTIMAL", palette.NEUTRAL),
    ],
)
def test_status_colors(classifier, make_reading, status, color):
    assert classifier.classify(make_reading(status=status)).status_color == color


def test_glucose_rising_is_worsening(classifier, make_reading):
    reading = make_reading(id="glucose", status="high", trend="up", trend_percent=12)
    descriptor = classifier.classify(reading)

    assert descriptor.status_color == palette.ALERT
    assert descriptor.polarity == Polarity.LOWER_IS_BETTER
    assert descriptor.is_good_trend is False
    assert descriptor.trend_color == palette.DANGER
    assert descriptor.trend_label == "Worsening"
    assert descriptor.trend_icon == "trending-up"
    assert descriptor.trend_percent_text == "12%"


def test_hdl_rising_is_improving(classifier, make_reading):
    reading = make_reading(id="hdl_cholesterol", status="optimal", trend="up", trend_percent=5)
    descriptor = classifier.classify(reading)

    assert descriptor.status_color == palette.SUCCESS
    assert descriptor.polarity == Polarity.HIGHER_IS_BETTER
    assert descriptor.is_good_trend is True
    assert descriptor.trend_color == palette.SUCCESS
    assert descriptor.trend_label == "Improving"


@pytest.mark.parametrize("biomarker_id", ["total_cholesterol", "ldl_cholesterol", "glucose", "creatinine"])
def test_lower_is_better_falling_is_improving(classifier, make_reading, biomarker_id):
    descriptor = classifier.classify(make_reading(id=biomarker_id, trend="down", trend_percent=8))
    assert descriptor.is_good_trend is True
    assert descriptor.trend_color == palette.SUCCESS
    assert descriptor.trend_label == "Improving"
    assert descriptor.trend_icon == "trending-down"


@pytest.mark.parametrize("biomarker_id", ["hdl_cholesterol", "vitamin_d", "Glucose", "ldl-cholesterol"])
def test_higher_is_better_falling_is_worsening(classifier, make_reading, biomarker_id):
    descriptor = classifier.classify(make_reading(id=biomarker_id, trend="down", trend_percent=3))
    assert descriptor.is_good_trend is False
    assert descriptor.trend_color == palette.DANGER
    assert descriptor.trend_label == "Worsening"


@pytest.mark.parametrize("biomarker_id", ["glucose", "hdl_cholesterol"])
def test_stable_is_neutral_and_hides_percent(classifier, make_reading, biomarker_id):
    descriptor = classifier.classify(make_reading(id=biomarker_id, trend="stable", trend_percent=2))
    assert descriptor.trend_color == palette.NEUTRAL
    assert descriptor.trend_label == "Stable"
    assert descriptor.trend_icon == "remove"
    assert descriptor.show_trend_percent is False
    assert descriptor.trend_percent_text is None


def test_stable_still_evaluates_directionality(classifier, make_reading):
    descriptor = classifier.classify(make_reading(id="glucose", trend="stable"))
    assert descriptor.is_good_trend is False


def test_arrow_glyph_ignores_polarity(classifier, make_reading):
    lower = classifier.classify(make_reading(id="glucose", trend="up"))
    higher = classifier.classify(make_reading(id="hdl_cholesterol", trend="up"))
    assert lower.trend_icon == higher.trend_icon == "trending-up"
    assert lower.trend_color != higher.trend_color


def test_value_does_not_affect_classification(classifier, make_reading):
    low_value = classifier.classify(make_reading(value=1, status="high", trend="down"))
    high_value = classifier.classify(make_reading(value=9999, status="high", trend="down"))
    assert low_value == high_value


def test_unknown_trend_falls_back_without_raising(classifier, make_reading, caplog):
    caplog.set_level(logging.DEBUG, logger="labinsights.services.biomarker_classifier")
    descriptor = classifier.classify(make_reading(status="mystery", trend="sideways", trend_percent=4))

    assert descriptor.status_color == palette.NEUTRAL
    assert descriptor.trend_icon == "remove"
    assert descriptor.trend_label == "Worsening"
    assert descriptor.trend_color == palette.DANGER
    assert "sideways" in caplog.text
    assert "mystery" in caplog.text


def test_trend_percent_passes_through_unclamped():
    assert format_trend_percent("up", 150) == "150%"
    assert format_trend_percent("down", -3.5) == "-3.5%"
    assert format_trend_percent("up", 12.0) == "12%"
    assert format_trend_percent("stable", 40) is None


def test_status_badge_is_upper_cased(classifier, make_reading):
    assert classifier.classify(make_reading(status="borderline")).status_badge == "BORDERLINE"


def test_injected_table_changes_directionality(make_reading):
    classifier = BiomarkerClassifier(PolarityTable(["hdl_cholesterol"]))
    assert classifier.classify(make_reading(id="hdl_cholesterol", trend="down")).trend_label == "Improving"
    assert classifier.classify(make_reading(id="glucose", trend="down")).trend_label == "Worsening"


def test_classify_many_preserves_order_and_is_idempotent(classifier, make_reading):
    readings = [
        make_reading(id="glucose", trend="up", trend_percent=12),
        make_reading(id="creatinine", trend="down", trend_percent=5),
        make_reading(id="glucose", trend="stable", trend_percent=2),
    ]
    first = classifier.classify_many(readings)
    second = classifier.classify_many(readings)

    assert [d.trend_label for d in first] == ["Worsening", "Improving", "Stable"]
    assert [d.model_dump_json() for d in first] == [d.model_dump_json() for d in second]
