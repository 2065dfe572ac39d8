# /campus_admin/services/academics_service.py

"""
This service module owns grade recording.

`update_grade` is an upsert: recording a grade for a (student, course)
pair that has no enrollment yet enrolls the student on the spot, so the
admin portal never has to check enrollment first. No capacity, duplicate
or grade-format checks happen here.
"""

import logging
from datetime import date

from ..core.exceptions import NotFoundError, DuplicateRecordError
from ..db.models.course_models import Enrollment

logger = logging.getLogger(__name__)


class AcademicsCoordinator:
    def __init__(self, enrollment_repo, student_repo, course_repo):
        self.enrollment_repo = enrollment_repo
        self.student_repo = student_repo
        self.course_repo = course_repo

    def update_grade(self, student_id: str, course_code: str, new_grade: str) -> Enrollment:
        """
        Sets the grade on the enrollment for (student_id, course_code),
        creating the enrollment if it does not exist yet.

        Raises:
            NotFoundError: when a new enrollment is needed but the student
                or the course does not exist. Nothing is written in that case.
        """
        enrollment = self.enrollment_repo.find_by_student_id_and_course_code(student_id, course_code)
        if enrollment:
            return self._apply_grade(enrollment, new_grade)

        try:
            return self._create_enrollment(student_id, course_code, new_grade)
        except DuplicateRecordError:
            # A concurrent call created the same enrollment between our lookup
            # and our insert. The row exists now, so grade it instead.
            enrollment = self.enrollment_repo.find_by_student_id_and_course_code(student_id, course_code)
            if not enrollment:
                raise
            logger.info("Enrollment %s/%s appeared concurrently; updating it", student_id, course_code)
            return self._apply_grade(enrollment, new_grade)

    def _apply_grade(self, enrollment: Enrollment, new_grade: str) -> Enrollment:
        enrollment.grade = new_grade
        saved = self.enrollment_repo.save(enrollment)
        logger.info("Updated grade for %s in %s", saved.student_id, saved.course_code)
        return saved

    def _create_enrollment(self, student_id: str, course_code: str, grade: str) -> Enrollment:
        student = self.student_repo.find_by_id(student_id)
        if not student:
            raise NotFoundError(f"Student not found for ID: {student_id}", entity="Student", identifier=student_id)

        course = self.course_repo.find_by_course_code(course_code)
        if not course:
            raise NotFoundError(f"Course not found for code: {course_code}", entity="Course", identifier=course_code)

        new_enrollment = Enrollment(
            student=student,
            course=course,
            grade=grade,
            enrollment_date=date.today(),
        )
        saved = self.enrollment_repo.save(new_enrollment)
        logger.info("Enrolled student %s in %s while recording a grade", student_id, course_code)
        return saved
