"""
Report Routes

Dashboard statistics and CSV export over every certificate in the portal.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from app.api.deps import ActiveUser, DbSession
from app.models.enums import CertificateType, Department, SemesterTerm
from app.reporting import FacetSelection
from app.schemas.report import ReportResponse
from app.services import report_service


router = APIRouter(prefix="/reports", tags=["Reports"])


def selection_from_query(
    type: Optional[CertificateType],
    department: Optional[Department],
    semester_term: Optional[SemesterTerm],
    year: Optional[int],
    q: Optional[str],
) -> FacetSelection:
    return FacetSelection(
        type=type,
        department=department,
        semester_term=semester_term,
        year=year,
        search=q,
    )


@router.get(
    "/",
    response_model=ReportResponse,
    summary="Report dashboard data",
)
async def get_report(
    current_user: ActiveUser,
    db: DbSession,
    type: Optional[CertificateType] = Query(None),
    department: Optional[Department] = Query(None),
    semester_term: Optional[SemesterTerm] = Query(None),
    year: Optional[int] = Query(None, ge=2000, le=2100),
    q: Optional[str] = Query(None, description="Search title, description and issuer"),
    page: int = Query(1, description="Table page (1-indexed); clamped into range"),
) -> ReportResponse:
    """
    KPIs, department and type charts, and one page of the table.

    Args:
        type, department, semester_term, year, q: Optional facets.
        page: Table page; values outside the available range are clamped.

    Returns:
        ReportResponse: Dashboard data for the selection.
    """
    certificates = await report_service.load_all_certificates(db)
    selection = selection_from_query(type, department, semester_term, year, q)
    return report_service.build_report(certificates, selection, page=page)


@router.get(
    "/export",
    summary="Export the filtered report as CSV",
    response_class=Response,
)
async def export_report(
    current_user: ActiveUser,
    db: DbSession,
    type: Optional[CertificateType] = Query(None),
    department: Optional[Department] = Query(None),
    semester_term: Optional[SemesterTerm] = Query(None),
    year: Optional[int] = Query(None, ge=2000, le=2100),
    q: Optional[str] = Query(None),
) -> Response:
    """
    Raises:
        HTTPException: 400 when no certificate matches the filters.
    """
    certificates = await report_service.load_all_certificates(db)
    selection = selection_from_query(type, department, semester_term, year, q)
    try:
        content = report_service.build_report_csv(certificates, selection)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": 'attachment; filename="reporte_certificados_uabc.csv"'
        },
    )
