# /tests/conftest.py

import pytest
from unittest.mock import MagicMock
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Importing the registry makes every model known to Base.metadata.
from campus_admin.db.base import Base
from campus_admin.db.database import build_engine
from campus_admin.db.models.student_models import ParentChildren
from campus_admin.core.security import PasswordHasher
from campus_admin.models import student_model, course_model
from campus_admin.services.database_helpers.student_repository_sql import StudentRepositorySQL
from campus_admin.services.database_helpers.course_repository_sql import CourseRepositorySQL
from campus_admin.services.database_helpers.enrollment_repository_sql import EnrollmentRepositorySQL
from campus_admin.services.database_helpers.fee_repository_sql import FeeRepositorySQL
from campus_admin.services.database_helpers.parent_children_repository_sql import ParentChildrenRepositorySQL
from campus_admin.services.student_service import StudentDirectory
from campus_admin.services.course_service import CourseCatalog
from campus_admin.services.enrollment_service import EnrollmentLookup
from campus_admin.services.academics_service import AcademicsCoordinator
from campus_admin.services.fee_service import FeeLedger
from campus_admin.services.parent_service import FamilyLinkResolver


@pytest.fixture
def db_session():
    """
    Creates a NEW, EMPTY in-memory SQLite database for EACH test function.
    StaticPool keeps the single connection alive so every session sees the same tables.
    """
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.fixture
def student_repo(db_session):
    return StudentRepositorySQL(db_session)


@pytest.fixture
def course_repo(db_session):
    return CourseRepositorySQL(db_session)


@pytest.fixture
def enrollment_repo(db_session):
    return EnrollmentRepositorySQL(db_session)


@pytest.fixture
def student_directory(student_repo, hasher):
    return StudentDirectory(student_repo, hasher)


@pytest.fixture
def course_catalog(course_repo):
    return CourseCatalog(course_repo)


@pytest.fixture
def enrollment_lookup(enrollment_repo):
    return EnrollmentLookup(enrollment_repo)


@pytest.fixture
def academics(enrollment_repo, student_repo, course_repo):
    return AcademicsCoordinator(enrollment_repo, student_repo, course_repo)


@pytest.fixture
def fee_ledger(db_session):
    return FeeLedger(FeeRepositorySQL(db_session))


@pytest.fixture
def family_resolver(db_session, student_repo):
    return FamilyLinkResolver(ParentChildrenRepositorySQL(db_session), student_repo)


@pytest.fixture
def mock_repo():
    """A bare mock store for tests that only care about the calls a service makes."""
    return MagicMock()


# --- Test Data Fixtures ---

@pytest.fixture
def alice_create():
    return student_model.StudentCreate(
        id="S1001",
        first_name="Alice",
        last_name="Nguyen",
        email="alice@campus.edu",
        password="s3cret-pass",
        major="Computer Science",
        grade="A",
        program="BSc",
        year=2,
        advisor="Dr. Rao",
    )


@pytest.fixture
def alice(student_directory, alice_create):
    """Alice, already persisted through the directory (so her password is hashed)."""
    return student_directory.create(alice_create)


@pytest.fixture
def cs101(course_catalog):
    return course_catalog.create(course_model.CourseCreate(course_code="CS101", course_name="Intro to Programming", credits=4))


@pytest.fixture
def add_parent_link(db_session):
    """Returns a helper that inserts a parent -> child link row."""
    def _add(parent_id: str, child_id: str) -> ParentChildren:
        link = ParentChildren(parent_id=parent_id, child_id=child_id)
        db_session.add(link)
        db_session.commit()
        return link
    return _add
