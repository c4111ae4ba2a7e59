"""
Upload Schemas
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, computed_field

from app.models.enums import SemesterTerm, UploadCategory
from app.services.file_service import format_bytes


class UploadResponse(BaseModel):
    id: uuid.UUID
    name: str
    title: Optional[str] = None
    category: UploadCategory
    semester_term: Optional[SemesterTerm] = None
    issued_on: Optional[date] = None
    content_type: str
    size: int
    created_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def size_label(self) -> str:
        return format_bytes(self.size)
