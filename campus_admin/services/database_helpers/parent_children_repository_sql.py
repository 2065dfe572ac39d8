# /campus_admin/services/database_helpers/parent_children_repository_sql.py

from typing import List
from sqlalchemy.orm import Session

from ...db.models.student_models import ParentChildren


class ParentChildrenRepositorySQL:
    """Read-only access to the parent -> child link table."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_parent_id(self, parent_id: str) -> List[ParentChildren]:
        return self.db.query(ParentChildren).filter(ParentChildren.parent_id == parent_id).all()
