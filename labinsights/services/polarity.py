from collections.abc import Iterable, Iterator
from functools import lru_cache

from labinsights.config import settings
from labinsights.schemas.biomarker import Polarity

DEFAULT_LOWER_IS_BETTER: tuple[str, ...] = (
    "total_cholesterol",
    "ldl_cholesterol",
    "glucose",
    "creatinine",
)


def parse_biomarker_ids(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class PolarityTable:
    """Read-only set of biomarker ids for which a lower value is better.

    Lookups are exact and case-sensitive. Any id not in the table is treated as
    higher-is-better, including misspellings of ids that are.
    """

    __slots__ = ("_lower_is_better",)

    def __init__(self, lower_is_better: Iterable[str] = DEFAULT_LOWER_IS_BETTER) -> None:
        self._lower_is_better = frozenset(lower_is_better)

    @classmethod
    def from_ids(cls, ids: Iterable[str]) -> "PolarityTable":
        return cls(ids)

    def is_lower_better(self, biomarker_id: str) -> bool:
        return biomarker_id in self._lower_is_better

    def polarity_of(self, biomarker_id: str) -> Polarity:
        if self.is_lower_better(biomarker_id):
            return Polarity.LOWER_IS_BETTER
        return Polarity.HIGHER_IS_BETTER

    def __contains__(self, biomarker_id: object) -> bool:
        return biomarker_id in self._lower_is_better

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._lower_is_better))

    def __len__(self) -> int:
        return len(self._lower_is_better)

    def __repr__(self) -> str:
        return f"PolarityTable({sorted(self._lower_is_better)!r})"


@lru_cache(maxsize=1)
def default_polarity_table() -> PolarityTable:
    return PolarityTable(parse_biomarker_ids(settings.lower_is_better_biomarkers))
