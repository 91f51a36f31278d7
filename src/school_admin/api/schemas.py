"""Wire shapes returned by the school backend.

References such as ``classId`` or ``studentName`` arrive either as a bare id
string or as a populated object; both decode to the same ``*Ref`` model so
repositories never have to check which one they got.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, List, Optional, Type, TypeVar, Union

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DecodeError

M = TypeVar("M", bound=BaseModel)


class APIModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
        populate_by_name=True,
    )


def _wrap_id(value: Any) -> Any:
    if isinstance(value, str):
        return {"_id": value}
    return value


def _parse_timestamp(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if len(text) == 10:
            d = date.fromisoformat(text)
            return datetime(d.year, d.month, d.day)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    return value


Timestamp = Annotated[Optional[datetime], BeforeValidator(_parse_timestamp)]


class ClassRef(APIModel):
    id: str = Field(alias="_id")
    class_name: Optional[str] = Field(None, alias="className")


class TeacherRef(APIModel):
    id: str = Field(alias="_id")
    full_name: Optional[str] = Field(None, alias="fullName")


class StudentRef(APIModel):
    id: str = Field(alias="_id")
    full_name: Optional[str] = Field(None, alias="fullName")
    shift: Optional[str] = None
    part: Optional[str] = Field(None, alias="Parts")


ClassLink = Annotated[Optional[ClassRef], BeforeValidator(_wrap_id)]
TeacherLink = Annotated[Optional[TeacherRef], BeforeValidator(_wrap_id)]
StudentLink = Annotated[Optional[StudentRef], BeforeValidator(_wrap_id)]


class ClassOut(APIModel):
    id: str = Field(alias="_id")
    numeric_class_id: Optional[Union[int, str]] = Field(None, alias="classId")
    class_name: str = Field("", alias="className")


class StudentOut(APIModel):
    id: str = Field(alias="_id")
    full_name: str = Field("", alias="fullName")
    class_ref: ClassLink = Field(None, alias="classId")
    shift: Optional[str] = None
    part: Optional[str] = Field(None, alias="Parts")
    phone: Optional[str] = None
    emergency_phone: Optional[str] = Field(None, alias="emergencyPhone")


class TeacherOut(APIModel):
    id: str = Field(alias="_id")
    full_name: str = Field("", alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None
    class_ref: ClassLink = Field(None, alias="classId")


class AttendanceEntryOut(APIModel):
    student: StudentLink = Field(None, alias="studentName")
    status: Optional[str] = None
    date: Timestamp = None
    shift: Optional[str] = None


class AttendanceSessionOut(APIModel):
    id: Optional[str] = Field(None, alias="_id")
    class_ref: ClassLink = Field(None, alias="classId")
    teacher_ref: TeacherLink = Field(None, alias="teacherName")
    students: List[AttendanceEntryOut] = Field(default_factory=list)
    created_at: Timestamp = Field(None, alias="createdAt")


class FinanceOut(APIModel):
    id: str = Field(alias="_id")
    student: StudentLink = Field(None, alias="fullName")
    class_ref: ClassLink = Field(None, alias="classId")
    month: Optional[str] = None
    year: Optional[int] = None
    amount_paid: float = Field(0, alias="amountPaid")
    purpose: Optional[str] = None
    date_paid: Timestamp = Field(None, alias="datePaid")


class MonthBucket(APIModel):
    month: Optional[Union[int, str]] = None
    year: Optional[int] = None


class MonthlyTotalOut(APIModel):
    bucket: Optional[MonthBucket] = Field(None, alias="_id")
    total_amount: float = Field(0, alias="totalAmount")


class AuthUserOut(APIModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    email: str = ""
    role: str
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("fullName", "name"))
    class_id: Optional[str] = Field(None, alias="classId")
    teacher_id: Optional[str] = Field(None, alias="teacherId")


class LoginOut(APIModel):
    token: Optional[str] = None
    user: AuthUserOut


class CurrentUserOut(APIModel):
    user: Optional[AuthUserOut] = None


class UserAccountOut(APIModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    email: str = ""
    role: str
    is_active: bool = Field(True, alias="isActive")
    teacher_ref: TeacherLink = Field(None, alias="teacherId")


class FinanceBriefOut(APIModel):
    month: Optional[str] = None
    year: Optional[int] = None
    amount_paid: float = Field(0, alias="amountPaid")
    purpose: Optional[str] = None


class PaymentStudentOut(APIModel):
    id: str = Field(alias="_id")
    full_name: str = Field("", alias="fullName")
    class_ref: ClassLink = Field(None, alias="classId")
    shift: Optional[str] = None
    finance_records: List[FinanceBriefOut] = Field(default_factory=list, alias="financeRecords")


class PaymentGroupsOut(APIModel):
    paid: List[PaymentStudentOut] = Field(default_factory=list)
    unpaid: List[PaymentStudentOut] = Field(default_factory=list)


class PaymentStatusOut(APIModel):
    total: int = 0
    paid: int = 0
    unpaid: int = 0
    filter: Union[str, MonthBucket, None] = "all"
    students: PaymentGroupsOut = Field(default_factory=PaymentGroupsOut)


class ProgressOut(APIModel):
    message: str = ""
    updated: int = 0
    details: dict[str, int] = Field(default_factory=dict)


def decode(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DecodeError(f"Unexpected {model.__name__} payload from backend: {e.error_count()} error(s)") from e


def decode_list(model: Type[M], data: Any) -> List[M]:
    try:
        return TypeAdapter(List[model]).validate_python(data if data is not None else [])
    except PydanticValidationError as e:
        raise DecodeError(f"Unexpected {model.__name__} list from backend: {e.error_count()} error(s)") from e


def unwrap_data(payload: Any) -> Any:
    """Accept both ``{"success": true, "data": [...]}`` and a bare list."""

    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload
