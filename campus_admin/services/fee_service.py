# /campus_admin/services/fee_service.py

"""
This service module manages fee records: invoicing a student, listing a
student's fees, recording payments, and the per-student financial summary
shown on the profile and parent portals.
"""

import logging
from typing import List

from ..core.exceptions import NotFoundError
from ..db.models.fee_models import Fee
from ..models import fee_model

logger = logging.getLogger(__name__)

PAID = "Paid"
PENDING = "Pending"
OVERDUE = "Overdue"


class FeeLedger:
    def __init__(self, fee_repo):
        self.fee_repo = fee_repo

    def create(self, fee_data: fee_model.FeeCreate) -> Fee:
        """Creates a fee record. An omitted status falls back to the store default."""
        saved = self.fee_repo.save(Fee(**fee_data.model_dump(exclude_none=True)))
        logger.info("Created fee %s for student %s", saved.fee_id, saved.student_id)
        return saved

    def get_by_student_id(self, student_id: str) -> List[Fee]:
        return self.fee_repo.find_by_student_id(student_id)

    def record_payment(self, fee_id: int) -> Fee:
        """
        Marks a fee as paid. Paying an already-paid fee leaves it paid;
        there is no way back to unpaid.
        """
        existing_fee = self.fee_repo.find_by_id(fee_id)
        if not existing_fee:
            raise NotFoundError(f"Fee record not found with ID: {fee_id}", entity="Fee", identifier=fee_id)

        existing_fee.status = PAID
        saved = self.fee_repo.save(existing_fee)
        logger.info("Recorded payment for fee %s", fee_id)
        return saved

    def summarize_for_student(self, student_id: str) -> fee_model.FeeSummary:
        fees = self.get_by_student_id(student_id)
        unpaid = [f for f in fees if f.status != PAID]

        total_pending = sum(float(f.amount or 0) for f in unpaid)
        due_dates = [f.due_date for f in unpaid if f.due_date is not None]

        if any(f.status == OVERDUE for f in fees):
            status = "OVERDUE"
        elif any(f.status == PENDING for f in fees) or total_pending > 0:
            status = "OUTSTANDING"
        else:
            status = "PAID"

        return fee_model.FeeSummary(
            total_pending=total_pending,
            next_due_date=min(due_dates) if due_dates else None,
            status=status,
        )
