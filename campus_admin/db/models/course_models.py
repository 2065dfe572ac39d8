# /campus_admin/db/models/course_models.py

"""
This module defines the SQLAlchemy ORM models for the `Course` catalog and
the `Enrollment` rows that tie a student to a course and carry its grade.
"""

from sqlalchemy import Column, String, Integer, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


class Course(Base):
    """SQLAlchemy model representing a course, keyed by its course code."""
    __tablename__ = "courses"

    course_code = Column(String, primary_key=True, index=True)
    course_name = Column(String, nullable=True)
    description = Column(String, nullable=True)
    credits = Column(Integer, nullable=True)
    instructor = Column(String, nullable=True)

    enrollments = relationship("Enrollment", back_populates="course", cascade="all, delete-orphan")


class Enrollment(Base):
    """
    SQLAlchemy model for a student's enrollment in a course.

    The logical identity is the (student_id, course_code) pair. The unique
    constraint makes the database the final arbiter when two grade updates
    race to create the same enrollment.
    """
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("student_id", "course_code", name="uq_enrollment_student_course"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    course_code = Column(String, ForeignKey("courses.course_code"), nullable=False)
    grade = Column(String, nullable=True)
    enrollment_date = Column(Date, nullable=True)

    student = relationship("Student", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")

    @property
    def course_credits(self):
        """Credit value of the enrolled course, or None when the course has none set."""
        return self.course.credits if self.course is not None else None
