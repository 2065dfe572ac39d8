# /campus_admin/db/models/student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Student` entity and
the `ParentChildren` link table that maps a parent account to its children.
"""

from sqlalchemy import Column, String, Integer, Date
from sqlalchemy.orm import relationship

from ..base_class import Base


class Student(Base):
    """
    SQLAlchemy model representing a single student.

    The primary key is assigned by the caller (the admin portal issues
    student IDs), and `email` doubles as the login username.
    """
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=True)

    # Always a one-way hash once persisted, never the plaintext.
    password = Column(String, nullable=True)

    major = Column(String, nullable=True)
    grade = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    address = Column(String, nullable=True)
    program = Column(String, nullable=True)
    year = Column(Integer, nullable=True)
    advisor = Column(String, nullable=True)

    # Enrollments and fees belong to the student and go with it on delete.
    enrollments = relationship("Enrollment", back_populates="student", cascade="all, delete-orphan")
    fees = relationship("Fee", back_populates="student", cascade="all, delete-orphan")


class ParentChildren(Base):
    """
    One row per (parent, child) pair.

    `child_id` is deliberately not a foreign key: a link may outlive the
    student it points to, and readers must tolerate that.
    """
    __tablename__ = "parent_children"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parent_id = Column(String, index=True, nullable=False)
    child_id = Column(String, nullable=False)
