# /campus_admin/services/database_helpers/enrollment_repository_sql.py

from typing import List, Optional

from ...db.models.course_models import Enrollment
from .base_repository_sql import BaseRepositorySQL


class EnrollmentRepositorySQL(BaseRepositorySQL):
    entity_name = "Enrollment"

    def find_by_student_id_and_course_code(self, student_id: str, course_code: str) -> Optional[Enrollment]:
        """Fetches the single enrollment identified by the (student, course) pair."""
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == student_id, Enrollment.course_code == course_code)
            .first()
        )

    def find_by_student_id(self, student_id: str) -> List[Enrollment]:
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == student_id)
            .order_by(Enrollment.id)
            .all()
        )
