"""
Aggregator

Summary statistics and grouped counts over a filtered certificate
collection, feeding the report KPIs and charts.
"""

from typing import Any, Callable, Iterable, NamedTuple, Sequence

from app.reporting.labels import (
    certificate_department_label,
    certificate_type_label,
)


EMPTY_YEAR_RANGE = "—"


class LabelCount(NamedTuple):
    """One bar or slice of a chart."""
    label: str
    count: int


def total_count(certificates: Sequence[Any]) -> int:
    return len(certificates)


def distinct_department_count(certificates: Iterable[Any]) -> int:
    """
    Number of distinct department values.

    All "other" certificates count as a single department here even when
    their free-text names differ. ``group_by_department`` splits them.
    """
    return len({c.department for c in certificates})


def year_range(certificates: Sequence[Any]) -> str:
    """``"<min>–<max>"`` over the ``year`` field, ``"—"`` when empty."""
    years = [c.year for c in certificates]
    if not years:
        return EMPTY_YEAR_RANGE
    return f"{min(years)}–{max(years)}"


def group_by(
    certificates: Iterable[Any],
    label_for: Callable[[Any], str],
) -> list[LabelCount]:
    """
    Count certificates per display label.

    Sorted by count descending. ``dict`` keeps insertion order and
    ``sorted`` is stable, so ties stay in first-encountered order.
    """
    counts: dict[str, int] = {}
    for certificate in certificates:
        label = label_for(certificate)
        counts[label] = counts.get(label, 0) + 1

    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LabelCount(label, count) for label, count in ordered]


def group_by_department(certificates: Iterable[Any]) -> list[LabelCount]:
    return group_by(certificates, certificate_department_label)


def group_by_type(certificates: Iterable[Any]) -> list[LabelCount]:
    return group_by(certificates, certificate_type_label)
