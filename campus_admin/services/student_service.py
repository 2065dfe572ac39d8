# /campus_admin/services/student_service.py

"""
This service module is the business logic layer for the student directory:
student CRUD, the roster export, and credential checks for login.

Passwords are hashed on the way in (create, and update when a new value is
supplied) and are only ever compared through the hasher's `verify`.
"""

import logging
from typing import List, Optional

import pandas as pd

from ..core.exceptions import NotFoundError
from ..db.models.student_models import Student
from ..models import student_model

logger = logging.getLogger(__name__)

# Every field an update overwrites, whether or not a value was supplied.
REPLACEABLE_FIELDS = (
    "first_name", "last_name", "major", "grade", "email", "phone_number",
    "date_of_birth", "address", "program", "year", "advisor",
)

EXPORT_COLUMNS = ["Student ID", "First Name", "Last Name", "Email", "Program", "Year", "Grade"]


class StudentDirectory:
    def __init__(self, student_repo, password_hasher):
        self.student_repo = student_repo
        self.password_hasher = password_hasher

    def authenticate(self, username: str, raw_password: str) -> Optional[Student]:
        """
        Returns the student whose email is `username` if `raw_password`
        matches the stored hash, otherwise None. An unknown email and a
        wrong password are indistinguishable to the caller.
        """
        student = self.student_repo.find_by_email(username)
        if student and student.password and self.password_hasher.verify(raw_password, student.password):
            return student
        logger.warning("Failed login attempt for username %s", username)
        return None

    def get_by_id(self, student_id: str) -> Student:
        student = self.student_repo.find_by_id(student_id)
        if not student:
            raise NotFoundError(f"Student not found with ID: {student_id}", entity="Student", identifier=student_id)
        return student

    def get_all(self) -> List[Student]:
        return self.student_repo.find_all()

    def create(self, student_data: student_model.StudentCreate) -> Student:
        """Persists a new student, replacing a non-empty plaintext password with its hash."""
        record = student_data.model_dump()
        if record.get("password"):
            record["password"] = self.password_hasher.hash(record["password"])
        saved = self.student_repo.save(Student(**record))
        logger.info("Created student %s", saved.id)
        return saved

    def update(self, student_id: str, student_update: student_model.StudentUpdate) -> Student:
        """
        Full replace of the student's profile fields. The stored password
        hash is only replaced when a non-empty new password is supplied.
        """
        existing = self.get_by_id(student_id)
        for field in REPLACEABLE_FIELDS:
            setattr(existing, field, getattr(student_update, field))

        if student_update.password:
            existing.password = self.password_hasher.hash(student_update.password)

        saved = self.student_repo.save(existing)
        logger.info("Updated student %s", student_id)
        return saved

    def delete(self, student_id: str) -> None:
        """Deletes a student. Deleting an ID that does not exist is a no-op."""
        self.student_repo.delete_by_id(student_id)
        logger.info("Deleted student %s (if present)", student_id)

    def export_as_csv(self) -> str:
        """Builds a CSV roster of every student. Password hashes are never exported."""
        export_data = [
            {
                "Student ID": s.id,
                "First Name": s.first_name,
                "Last Name": s.last_name,
                "Email": s.email,
                "Program": s.program,
                "Year": s.year,
                "Grade": s.grade if s.grade is not None else "N/A",
            } for s in self.get_all()
        ]
        df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
        return df.to_csv(index=False)
