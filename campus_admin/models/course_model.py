# /campus_admin/models/course_model.py

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class CourseCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    course_code: str = Field(..., min_length=1, description="The unique course code, e.g. 'CS101'.")
    course_name: Optional[str] = None
    description: Optional[str] = None
    credits: Optional[int] = None
    instructor: Optional[str] = None


class Course(CourseCreate):
    """The full representation of a Course resource."""
    pass
