# /campus_admin/services/database_helpers/course_repository_sql.py

from typing import List, Optional

from ...db.models.course_models import Course
from .base_repository_sql import BaseRepositorySQL


class CourseRepositorySQL(BaseRepositorySQL):
    entity_name = "Course"

    def find_by_course_code(self, course_code: str) -> Optional[Course]:
        return self.db.query(Course).filter(Course.course_code == course_code).first()

    def find_all(self) -> List[Course]:
        return self.db.query(Course).order_by(Course.course_code).all()
