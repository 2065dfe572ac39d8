# /campus_admin/models/fee_model.py

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class FeeCreate(BaseModel):
    """
    The model used for creating a new fee record. When `status` is omitted
    the store default ("Pending") applies.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    student_id: str = Field(..., min_length=1)
    amount: Optional[float] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[str] = None


class Fee(FeeCreate):
    fee_id: int
    status: str


class FeeSummary(BaseModel):
    """Financial overview of one student, as shown on the profile page."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_pending: float = Field(..., description="Sum of all fee amounts that are not yet paid.")
    next_due_date: Optional[date] = Field(default=None, description="Earliest due date among unpaid fees.")
    status: str = Field(..., description="One of PAID, OUTSTANDING or OVERDUE.")
