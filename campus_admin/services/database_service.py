# /campus_admin/services/database_service.py

"""
FastAPI dependency providers for the service layer.

Each provider builds one service component for the current request,
passing it the SQL repositories it needs. Nothing is cached between
requests: a component lives exactly as long as its database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ..db.database import get_db
from ..core.security import password_hasher

from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.course_repository_sql import CourseRepositorySQL
from .database_helpers.enrollment_repository_sql import EnrollmentRepositorySQL
from .database_helpers.fee_repository_sql import FeeRepositorySQL
from .database_helpers.parent_children_repository_sql import ParentChildrenRepositorySQL

from .student_service import StudentDirectory
from .course_service import CourseCatalog
from .enrollment_service import EnrollmentLookup
from .academics_service import AcademicsCoordinator
from .fee_service import FeeLedger
from .parent_service import FamilyLinkResolver


def get_student_directory(db: Session = Depends(get_db)) -> StudentDirectory:
    return StudentDirectory(StudentRepositorySQL(db), password_hasher)


def get_course_catalog(db: Session = Depends(get_db)) -> CourseCatalog:
    return CourseCatalog(CourseRepositorySQL(db))


def get_enrollment_lookup(db: Session = Depends(get_db)) -> EnrollmentLookup:
    return EnrollmentLookup(EnrollmentRepositorySQL(db))


def get_academics_coordinator(db: Session = Depends(get_db)) -> AcademicsCoordinator:
    return AcademicsCoordinator(
        enrollment_repo=EnrollmentRepositorySQL(db),
        student_repo=StudentRepositorySQL(db),
        course_repo=CourseRepositorySQL(db),
    )


def get_fee_ledger(db: Session = Depends(get_db)) -> FeeLedger:
    return FeeLedger(FeeRepositorySQL(db))


def get_family_link_resolver(db: Session = Depends(get_db)) -> FamilyLinkResolver:
    return FamilyLinkResolver(
        parent_children_repo=ParentChildrenRepositorySQL(db),
        student_repo=StudentRepositorySQL(db),
    )
