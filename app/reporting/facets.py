"""
Facet Filter

Narrows a certificate collection by a conjunction of optional facets:
type, department, semester term, year and free-text search.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional


# Values a caller may send to mean "no filter on this facet"
UNSET_VALUES = (None, "", "all")


@dataclass(frozen=True)
class FacetSelection:
    """
    The current filter choice.

    Every facet is optional. ``None``, ``""`` and ``"all"`` leave a facet
    unset. Enumerated facets are compared by value, so either enum members
    or their raw strings work.
    """
    type: Optional[str] = None
    department: Optional[str] = None
    semester_term: Optional[str] = None
    year: Optional[int] = None
    search: Optional[str] = None

    @property
    def search_text(self) -> str:
        """Trimmed, lower-cased search text; empty when no search applies."""
        return (self.search or "").strip().lower()


def _is_unset(value: Any) -> bool:
    return any(value is unset or value == unset for unset in UNSET_VALUES)


def _matches_exact(actual: Any, expected: Any) -> bool:
    if _is_unset(expected):
        return True
    return actual == expected


def _matches_search(certificate: Any, text: str) -> bool:
    if not text:
        return True
    for field_name in ("title", "description", "issuer"):
        value = getattr(certificate, field_name, None) or ""
        if text in value.lower():
            return True
    return False


def matches(certificate: Any, selection: FacetSelection) -> bool:
    """Return True when the certificate satisfies every set facet."""
    if not _matches_exact(certificate.type, selection.type):
        return False
    if not _matches_exact(certificate.department, selection.department):
        return False
    if not _matches_exact(certificate.semester_term, selection.semester_term):
        return False
    if not _matches_exact(certificate.year, selection.year):
        return False
    return _matches_search(certificate, selection.search_text)


def filter_certificates(certificates: Iterable[Any], selection: FacetSelection) -> list:
    """
    Apply a facet selection to a certificate collection.

    The result keeps the input order. No facet value is validated here; a
    value no certificate carries simply yields an empty list.

    Args:
        certificates: Any iterable of certificate-like objects exposing
            ``type``, ``department``, ``semester_term``, ``year``, ``title``,
            ``description`` and ``issuer`` attributes.
        selection: Facets to apply.

    Returns:
        list: The matching certificates.
    """
    return [c for c in certificates if matches(c, selection)]
