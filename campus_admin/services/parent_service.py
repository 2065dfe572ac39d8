# /campus_admin/services/parent_service.py

import logging
from typing import List

from ..models.student_model import StudentSummary

logger = logging.getLogger(__name__)


class FamilyLinkResolver:
    def __init__(self, parent_children_repo, student_repo):
        self.parent_children_repo = parent_children_repo
        self.student_repo = student_repo

    def get_children_for_parent(self, parent_id: str) -> List[StudentSummary]:
        """
        Returns a StudentSummary for every child linked to `parent_id`, in
        the order the link table yields them.
        """
        summaries = []
        for link in self.parent_children_repo.find_by_parent_id(parent_id):
            student = self.student_repo.find_by_id(link.child_id)
            if student is None:
                # Orphaned link: skip it so one stale row cannot break the family view.
                logger.debug("Parent %s links to missing student %s; skipping", parent_id, link.child_id)
                continue
            summaries.append(StudentSummary(
                id=link.child_id,
                first_name=student.first_name,
                last_name=student.last_name,
                email=student.email,
            ))
        return summaries
