"""
Report Service

Loads every certificate and runs the reporting core over it for the
dashboard and the CSV export.
"""

import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from app.core.config import settings
from app.models.certificate import Certificate
from app.reporting import (
    FacetSelection,
    Paginator,
    build_csv,
    distinct_department_count,
    filter_certificates,
    group_by_department,
    group_by_type,
    total_count,
    year_range,
)
from app.reporting.labels import (
    certificate_department_label,
    certificate_type_label,
    modality_label,
    semester_label,
)
from app.schemas.report import (
    ChartEntry,
    ReportKPIs,
    ReportResponse,
    ReportRow,
    ReportTablePage,
)


logger = logging.getLogger(__name__)


REPORT_CSV_HEADERS = [
    "Título",
    "Tipo",
    "Departamento",
    "Año",
    "Semestre",
    "Emisor",
    "Descripción",
    "Horas",
    "Modalidad",
    "Fecha de emisión",
]


async def load_all_certificates(db: AsyncSession) -> List[Certificate]:
    """Every certificate across all users, without file data."""
    result = await db.execute(
        select(Certificate)
        .options(defer(Certificate.data))
        .order_by(Certificate.created_at.desc(), Certificate.id)
    )
    return list(result.scalars().all())


def report_row(certificate: Certificate) -> ReportRow:
    return ReportRow(
        id=certificate.id,
        title=certificate.title,
        type_label=certificate_type_label(certificate),
        department_label=certificate_department_label(certificate),
        semester_label=semester_label(certificate.semester_term),
        year=certificate.year,
        issuer=certificate.issuer,
        hours=certificate.hours,
        modality_label=modality_label(certificate.modality) if certificate.modality else None,
        issued_on=certificate.issued_on,
    )


def build_report(
    certificates: Sequence[Certificate],
    selection: FacetSelection,
    page: int = 1,
    page_size: int | None = None,
) -> ReportResponse:
    """
    Compute KPIs, both charts and one table page for a filter selection.

    Args:
        certificates: The full collection.
        selection: Facets chosen on the dashboard.
        page: Requested table page (1-indexed); clamped into range.
        page_size: Rows per table page.

    Returns:
        ReportResponse: Everything the dashboard renders.
    """
    filtered = filter_certificates(certificates, selection)
    paginator = Paginator(filtered, page_size or settings.REPORT_PAGE_SIZE)
    index = paginator.clamp(page - 1)

    return ReportResponse(
        kpis=ReportKPIs(
            total=total_count(filtered),
            departments=distinct_department_count(filtered),
            year_range=year_range(filtered),
        ),
        by_department=[
            ChartEntry(label=entry.label, count=entry.count)
            for entry in group_by_department(filtered)
        ],
        by_type=[
            ChartEntry(label=entry.label, count=entry.count)
            for entry in group_by_type(filtered)
        ],
        table=ReportTablePage(
            items=[report_row(c) for c in paginator.page(index)],
            total=paginator.total,
            page=index + 1,
            size=paginator.page_size,
            pages=paginator.page_count,
        ),
    )


def export_row(certificate: Certificate) -> Dict[str, Any]:
    """Flat CSV record with every enumeration translated."""
    return {
        "Título": certificate.title,
        "Tipo": certificate_type_label(certificate),
        "Departamento": certificate_department_label(certificate),
        "Año": certificate.year,
        "Semestre": semester_label(certificate.semester_term),
        "Emisor": certificate.issuer or "",
        "Descripción": certificate.description or "",
        "Horas": certificate.hours or "",
        "Modalidad": modality_label(certificate.modality) if certificate.modality else "",
        "Fecha de emisión": certificate.issued_on.isoformat() if certificate.issued_on else "",
    }


def build_report_csv(
    certificates: Sequence[Certificate],
    selection: FacetSelection,
) -> str:
    """
    CSV of the whole filtered set.

    Raises:
        ValueError: If no certificate matches the selection.
    """
    filtered = filter_certificates(certificates, selection)
    if not filtered:
        raise ValueError("No hay datos para exportar")

    logger.info("Exporting %d certificates to CSV", len(filtered))
    return build_csv([export_row(c) for c in filtered], headers=REPORT_CSV_HEADERS)
