# /campus_admin/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import StreamingResponse
from typing import List

from ..core.exceptions import NotFoundError, DuplicateRecordError, ConstraintViolationError
from ..models import student_model
from ..services.database_service import get_student_directory
from ..services.student_service import StudentDirectory

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/v1/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get All Students")
def get_all_students(directory: StudentDirectory = Depends(get_student_directory)):
    return directory.get_all()

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a New Student")
def create_student(student_create: student_model.StudentCreate, directory: StudentDirectory = Depends(get_student_directory)):
    try:
        return directory.create(student_create)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/export", summary="Export All Students as CSV", response_class=StreamingResponse)
def export_students_csv(directory: StudentDirectory = Depends(get_student_directory)):
    csv_string = directory.export_as_csv()
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": "attachment; filename=students.csv"})

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/v1/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(student_id: str, directory: StudentDirectory = Depends(get_student_directory)):
    try:
        return directory.get_by_id(student_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.put("/{student_id}", response_model=student_model.Student, summary="Replace a Student's Details")
def update_student(student_id: str, student_update: student_model.StudentUpdate, directory: StudentDirectory = Depends(get_student_directory)):
    try:
        return directory.update(student_id, student_update)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: str, directory: StudentDirectory = Depends(get_student_directory)):
    directory.delete(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
