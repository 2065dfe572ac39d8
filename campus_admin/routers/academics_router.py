# /campus_admin/routers/academics_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import NotFoundError
from ..models import enrollment_model
from ..services.database_service import get_academics_coordinator
from ..services.academics_service import AcademicsCoordinator

router = APIRouter()


@router.put("/grade", response_model=enrollment_model.Enrollment, summary="Record a Grade (Enrolling if Needed)")
def update_grade(grade_update: enrollment_model.GradeUpdate, coordinator: AcademicsCoordinator = Depends(get_academics_coordinator)):
    try:
        return coordinator.update_grade(grade_update.student_id, grade_update.course_code, grade_update.grade)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
