# /campus_admin/db/models/fee_models.py

from sqlalchemy import Column, String, Integer, Float, Date, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


class Fee(Base):
    """
    SQLAlchemy model for a single fee record (an invoice line) owed by a student.
    `status` defaults to "Pending" and only ever moves forward to "Paid".
    """
    __tablename__ = "fees"

    fee_id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    amount = Column(Float, nullable=True)
    description = Column(String, nullable=True)
    due_date = Column(Date, nullable=True)
    status = Column(String, nullable=False, default="Pending")

    student = relationship("Student", back_populates="fees")
