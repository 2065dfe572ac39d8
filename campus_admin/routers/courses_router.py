# /campus_admin/routers/courses_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List

from ..core.exceptions import NotFoundError, DuplicateRecordError, ConstraintViolationError
from ..models import course_model
from ..services.database_service import get_course_catalog
from ..services.course_service import CourseCatalog

router = APIRouter()


@router.get("", response_model=List[course_model.Course], summary="Get All Courses")
def get_all_courses(catalog: CourseCatalog = Depends(get_course_catalog)):
    return catalog.get_all()

@router.post("", response_model=course_model.Course, status_code=status.HTTP_201_CREATED, summary="Create a New Course")
def create_course(course_create: course_model.CourseCreate, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        return catalog.create(course_create)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.delete("/{course_code}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Course")
def delete_course(course_code: str, catalog: CourseCatalog = Depends(get_course_catalog)):
    try:
        catalog.delete(course_code)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
