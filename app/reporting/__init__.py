"""
Certificate Portal - Reporting Core

Pure, synchronous filtering, aggregation and pagination over
already-loaded certificate collections.
"""

from app.reporting.aggregation import (
    EMPTY_YEAR_RANGE,
    LabelCount,
    distinct_department_count,
    group_by_department,
    group_by_type,
    total_count,
    year_range,
)
from app.reporting.csv_export import build_csv
from app.reporting.facets import FacetSelection, filter_certificates
from app.reporting.pagination import DEFAULT_PAGE_SIZE, Paginator

__all__ = [
    "EMPTY_YEAR_RANGE",
    "LabelCount",
    "distinct_department_count",
    "group_by_department",
    "group_by_type",
    "total_count",
    "year_range",
    "build_csv",
    "FacetSelection",
    "filter_certificates",
    "DEFAULT_PAGE_SIZE",
    "Paginator",
]
