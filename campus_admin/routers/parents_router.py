# /campus_admin/routers/parents_router.py

from fastapi import APIRouter, Depends
from typing import List

from ..models.student_model import StudentSummary
from ..services.database_service import get_family_link_resolver
from ..services.parent_service import FamilyLinkResolver

router = APIRouter()


@router.get("/{parent_id}/children", response_model=List[StudentSummary], summary="Get a Parent's Linked Children")
def get_children(parent_id: str, resolver: FamilyLinkResolver = Depends(get_family_link_resolver)):
    return resolver.get_children_for_parent(parent_id)
