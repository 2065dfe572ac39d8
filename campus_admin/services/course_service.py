# /campus_admin/services/course_service.py

import logging
from typing import List

from ..core.exceptions import NotFoundError
from ..db.models.course_models import Course
from ..models import course_model

logger = logging.getLogger(__name__)


class CourseCatalog:
    def __init__(self, course_repo):
        self.course_repo = course_repo

    def create(self, course_data: course_model.CourseCreate) -> Course:
        saved = self.course_repo.save(Course(**course_data.model_dump()))
        logger.info("Created course %s", saved.course_code)
        return saved

    def get_all(self) -> List[Course]:
        return self.course_repo.find_all()

    def delete(self, course_code: str) -> None:
        """
        Deletes a course by code. Unlike student deletion this is strict:
        an unknown code raises NotFoundError.
        """
        course = self.course_repo.find_by_course_code(course_code)
        if not course:
            raise NotFoundError(f"Course not found: {course_code}", entity="Course", identifier=course_code)
        self.course_repo.delete(course)
        logger.info("Deleted course %s", course_code)
