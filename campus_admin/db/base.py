# /campus_admin/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing them here guarantees Base.metadata knows every table before
# `create_all` runs at startup (and in the test fixtures).

from .base_class import Base

from .models.student_models import Student, ParentChildren
from .models.course_models import Course, Enrollment
from .models.fee_models import Fee
