# /campus_admin/services/database_helpers/fee_repository_sql.py

from typing import List, Optional

from ...db.models.fee_models import Fee
from .base_repository_sql import BaseRepositorySQL


class FeeRepositorySQL(BaseRepositorySQL):
    entity_name = "Fee"

    def find_by_id(self, fee_id: int) -> Optional[Fee]:
        return self.db.query(Fee).filter(Fee.fee_id == fee_id).first()

    def find_by_student_id(self, student_id: str) -> List[Fee]:
        return self.db.query(Fee).filter(Fee.student_id == student_id).order_by(Fee.fee_id).all()
