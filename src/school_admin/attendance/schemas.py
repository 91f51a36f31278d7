"""Request body of an attendance submission."""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from ..api.schemas import APIModel


class AttendanceSubmitIn(APIModel):
    class_id: Optional[str] = Field(None, alias="classId")
    teacher_id: Optional[str] = Field(None, alias="teacherId")
    date: Optional[str] = None
    marks: Optional[Dict[str, str]] = None
    # Marks every student visible under shift/part with one status.
    mark_all: Optional[str] = Field(None, alias="markAll")
    shift: Optional[str] = None
    part: Optional[str] = None
