# /campus_admin/models/enrollment_model.py

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class Enrollment(BaseModel):
    """A student's enrollment in one course, with the grade recorded for it."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    student_id: str
    course_code: str
    grade: Optional[str] = None
    enrollment_date: Optional[date] = None
    course_credits: Optional[int] = Field(default=None, description="Credit value of the enrolled course.")


class GradeUpdate(BaseModel):
    """
    Payload for PUT /academics/grade. If the student is not yet enrolled in
    the course, recording a grade enrolls them.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)
    grade: str


class AcademicSummary(BaseModel):
    """Academic overview of one student, as shown on the profile and parent portals."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    gpa: Optional[float] = Field(default=None, description="Credit-weighted grade point average; null when no graded credits count.")
    credits_earned: int = Field(..., description="Credits from courses with a passing grade.")
