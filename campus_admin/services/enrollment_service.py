# /campus_admin/services/enrollment_service.py

"""
Read-only queries over enrollments, including the GPA and credits-earned
figures shown on the student profile and the parent portal.
"""

from typing import List, Optional

from ..db.models.course_models import Enrollment
from ..models.enrollment_model import AcademicSummary

GRADE_POINTS = {"A+": 4.0, "A": 4.0, "B+": 3.0, "B": 2.0, "C": 1.0}

# Grades that do not earn the course's credits.
NON_EARNING_GRADES = {"", "N/A", "F"}


def grade_to_points(grade: Optional[str]) -> float:
    """Maps a letter grade to grade points. Unknown or missing grades are worth 0."""
    return GRADE_POINTS.get(grade, 0.0)


class EnrollmentLookup:
    def __init__(self, enrollment_repo):
        self.enrollment_repo = enrollment_repo

    def get_by_student_id(self, student_id: str) -> List[Enrollment]:
        return self.enrollment_repo.find_by_student_id(student_id)

    def summarize_for_student(self, student_id: str) -> AcademicSummary:
        """
        Computes a credit-weighted GPA and the credits earned.

        Courses without a positive credit value are ignored entirely. Only
        grades worth points count towards the GPA denominator, so an F lowers
        neither the GPA nor adds earned credits.
        """
        total_points = 0.0
        credits_for_gpa = 0
        credits_earned = 0
        for enrollment in self.get_by_student_id(student_id):
            credits = enrollment.course_credits or 0
            if credits <= 0:
                continue
            grade = enrollment.grade
            if grade is not None and grade not in NON_EARNING_GRADES:
                credits_earned += credits
            points = grade_to_points(grade)
            total_points += points * credits
            if points > 0:
                credits_for_gpa += credits

        return AcademicSummary(
            gpa=total_points / credits_for_gpa if credits_for_gpa else None,
            credits_earned=credits_earned,
        )
