"""
Report Schemas

Pydantic models for the reports dashboard.
"""

import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class ReportKPIs(BaseModel):
    """Headline numbers above the charts."""

    total: int = Field(..., description="Certificates matching the filters")
    departments: int = Field(..., description="Distinct department values")
    year_range: str = Field(..., description='"<min>–<max>" or "—"')


class ChartEntry(BaseModel):
    label: str
    count: int


class ReportRow(BaseModel):
    """One certificate in the report table, with display labels."""

    id: uuid.UUID
    title: str
    type_label: str
    department_label: str
    semester_label: str
    year: int
    issuer: Optional[str] = None
    hours: Optional[int] = None
    modality_label: Optional[str] = None
    issued_on: Optional[date] = None


class ReportTablePage(BaseModel):
    items: List[ReportRow]
    total: int
    page: int
    size: int
    pages: int


class ReportResponse(BaseModel):
    """Everything the reports page renders for one filter selection."""

    kpis: ReportKPIs
    by_department: List[ChartEntry]
    by_type: List[ChartEntry]
    table: ReportTablePage
