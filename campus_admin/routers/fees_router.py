# /campus_admin/routers/fees_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..core.exceptions import NotFoundError, DuplicateRecordError, ConstraintViolationError
from ..models import fee_model
from ..services.database_service import get_fee_ledger
from ..services.fee_service import FeeLedger

router = APIRouter()


@router.post("", response_model=fee_model.Fee, status_code=status.HTTP_201_CREATED, summary="Create a Fee Record")
def create_fee(fee_create: fee_model.FeeCreate, ledger: FeeLedger = Depends(get_fee_ledger)):
    try:
        return ledger.create(fee_create)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/student/{student_id}", response_model=List[fee_model.Fee], summary="Get a Student's Fees")
def get_fees_for_student(student_id: str, ledger: FeeLedger = Depends(get_fee_ledger)):
    return ledger.get_by_student_id(student_id)

@router.get("/student/{student_id}/summary", response_model=fee_model.FeeSummary, summary="Get a Student's Fee Summary")
def get_fee_summary(student_id: str, ledger: FeeLedger = Depends(get_fee_ledger)):
    return ledger.summarize_for_student(student_id)

@router.put("/{fee_id}/pay", response_model=fee_model.Fee, summary="Record a Payment")
def record_payment(fee_id: int, ledger: FeeLedger = Depends(get_fee_ledger)):
    try:
        return ledger.record_payment(fee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
