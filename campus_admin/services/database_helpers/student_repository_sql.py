# /campus_admin/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the `students` table. This is the direct
interface to the database for the student directory.
"""

from typing import List, Optional

from ...db.models.student_models import Student
from .base_repository_sql import BaseRepositorySQL


class StudentRepositorySQL(BaseRepositorySQL):
    entity_name = "Student"

    def find_by_id(self, student_id: str) -> Optional[Student]:
        """Fetches a single student by primary key."""
        return self.db.query(Student).filter(Student.id == student_id).first()

    def find_by_email(self, email: str) -> Optional[Student]:
        """Fetches a single student by their login email address."""
        return self.db.query(Student).filter(Student.email == email).first()

    def find_all(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()

    def delete_by_id(self, student_id: str) -> None:
        """
        Deletes a student if present. Missing rows are ignored.
        The ORM cascade removes the student's enrollments and fees with it.
        """
        db_student = self.find_by_id(student_id)
        if db_student:
            self.delete(db_student)
