# /campus_admin/models/auth_model.py

from pydantic import BaseModel

from .student_model import Student


class LoginRequest(BaseModel):
    """Credentials posted by the login form. `username` is the student's email."""
    username: str
    password: str


class LoginResponse(BaseModel):
    user: Student
