# /campus_admin/routers/enrollments_router.py

from fastapi import APIRouter, Depends
from typing import List

from ..models import enrollment_model
from ..services.database_service import get_enrollment_lookup
from ..services.enrollment_service import EnrollmentLookup

router = APIRouter()


@router.get("/student/{student_id}", response_model=List[enrollment_model.Enrollment], summary="Get a Student's Enrollments")
def get_enrollments_for_student(student_id: str, lookup: EnrollmentLookup = Depends(get_enrollment_lookup)):
    return lookup.get_by_student_id(student_id)

@router.get("/student/{student_id}/summary", response_model=enrollment_model.AcademicSummary, summary="Get a Student's GPA and Credits Earned")
def get_academic_summary(student_id: str, lookup: EnrollmentLookup = Depends(get_enrollment_lookup)):
    return lookup.summarize_for_student(student_id)
