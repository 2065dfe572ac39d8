# /campus_admin/models/student_model.py

# --- Core Imports ---
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The fields a caller may set on a Student. On the wire every field uses
    camelCase (`firstName`, `phoneNumber`, ...); Python code uses snake_case.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = Field(default=None, description="The student's email, also used as the login username.")
    major: Optional[str] = None
    grade: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    program: Optional[str] = None
    year: Optional[int] = None
    advisor: Optional[str] = None


class StudentCreate(StudentBase):
    """The model used for creating a new student. The ID is issued by the caller."""
    id: str = Field(..., min_length=1, description="The externally assigned student ID.")
    password: Optional[str] = Field(default=None, description="Plaintext password; hashed before it is stored.")


class StudentUpdate(StudentBase):
    """
    The model for updating a student. This is a full replace: every field
    not supplied is written back as null, except `password`, which is left
    untouched unless a non-empty value is given.
    """
    password: Optional[str] = None


class Student(StudentBase):
    """
    The full representation of a Student as returned by the API.
    The password hash is never part of the response.
    """
    id: str


class StudentSummary(BaseModel):
    """Minimal projection of a student, used for a parent's list of children."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
