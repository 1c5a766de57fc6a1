import logging
from collections.abc import Iterable

from labinsights.schemas.biomarker import (
    BiomarkerDescriptor,
    BiomarkerReading,
    Status,
    Trend,
)
from labinsights.services import palette
from labinsights.services.polarity import PolarityTable, default_polarity_table

logger = logging.getLogger(__name__)

STATUS_COLORS: dict[str, str] = {
    Status.OPTIMAL.value: palette.SUCCESS,
    Status.NORMAL.value: palette.SUCCESS_LIGHT,
    Status.BORDERLINE.value: palette.WARNING,
    Status.HIGH.value: palette.ALERT,
    Status.LOW.value: palette.DANGER,
}

TREND_ICONS: dict[str, str] = {
    Trend.UP.value: "trending-up",
    Trend.DOWN.value: "trending-down",
    Trend.STABLE.value: "remove",
}
DEFAULT_TREND_ICON = "remove"


def status_color(status: str) -> str:
    color = STATUS_COLORS.get(status)
    if color is None:
        logger.debug("Unknown biomarker status %r, using neutral color", status)
        return palette.NEUTRAL
    return color


def trend_icon(trend: str) -> str:
    return TREND_ICONS.get(trend, DEFAULT_TREND_ICON)


def trend_color(trend: str, is_good_trend: bool) -> str:
    if trend == Trend.STABLE.value:
        return palette.NEUTRAL
    return palette.SUCCESS if is_good_trend else palette.DANGER


def trend_label(trend: str, is_good_trend: bool) -> str:
    if trend == Trend.STABLE.value:
        return "Stable"
    return "Improving" if is_good_trend else "Worsening"


def format_trend_percent(trend: str, trend_percent: float) -> str | None:
    """Percentage text for a trend, or None when it should not be shown.

    Stable readings never show a percentage. Magnitudes are not clamped.
    """
    if trend == Trend.STABLE.value:
        return None
    value = trend_percent
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}%"


class BiomarkerClassifier:
    """Maps a biomarker reading to colors, labels and glyphs for display.

    Directionality depends only on the trend and whether the biomarker id is in
    the polarity table; the reading's value is never consulted.
    """

    def __init__(self, polarity_table: PolarityTable | None = None) -> None:
        self.polarity_table = polarity_table if polarity_table is not None else default_polarity_table()

    def is_good_trend(self, biomarker_id: str, trend: str) -> bool:
        if self.polarity_table.is_lower_better(biomarker_id):
            return trend == Trend.DOWN.value
        return trend == Trend.UP.value

    def classify(self, reading: BiomarkerReading) -> BiomarkerDescriptor:
        if reading.trend not in TREND_ICONS:
            logger.debug("Unknown trend %r for biomarker %r", reading.trend, reading.id)

        # Evaluated for stable readings too; trend_color/trend_label ignore it then.
        good = self.is_good_trend(reading.id, reading.trend)
        percent_text = format_trend_percent(reading.trend, reading.trend_percent)

        return BiomarkerDescriptor(
            status_color=status_color(reading.status),
            status_badge=reading.status.upper(),
            polarity=self.polarity_table.polarity_of(reading.id),
            is_good_trend=good,
            trend_color=trend_color(reading.trend, good),
            trend_label=trend_label(reading.trend, good),
            trend_icon=trend_icon(reading.trend),
            show_trend_percent=percent_text is not None,
            trend_percent_text=percent_text,
        )

    def classify_many(self, readings: Iterable[BiomarkerReading]) -> list[BiomarkerDescriptor]:
        return [self.classify(reading) for reading in readings]

