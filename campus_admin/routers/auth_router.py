# /campus_admin/routers/auth_router.py

"""
Login endpoint. Credentials are checked by the student directory; this
router only turns "no match" into a 401.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.auth_model import LoginRequest, LoginResponse
from ..models.student_model import Student
from ..services.database_service import get_student_directory
from ..services.student_service import StudentDirectory

router = APIRouter()


@router.post("/login", response_model=LoginResponse, summary="Log In with Email and Password")
def login(credentials: LoginRequest, directory: StudentDirectory = Depends(get_student_directory)):
    student = directory.authenticate(credentials.username, credentials.password)
    if student is None:
        # One message for both "unknown user" and "wrong password".
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return LoginResponse(user=Student.model_validate(student))
