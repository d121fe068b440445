"""
Payments API Endpoints

Cash movements (incoming and outgoing).
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import payment_service
from ..models import Payment, PaymentIn
from ..service import PaymentService

router = APIRouter()


@router.get("", response_model=List[Payment])
async def list_payments(service: PaymentService = Depends(payment_service)):
    """List all payments"""
    return service.list()


@router.post("", response_model=Payment, status_code=201)
async def create_payment(data: PaymentIn, service: PaymentService = Depends(payment_service)):
    return service.create(data)


@router.patch("/{payment_id}", response_model=Payment)
async def update_payment(
    payment_id: int,
    data: PaymentIn,
    service: PaymentService = Depends(payment_service),
):
    return service.update(payment_id, data)


@router.delete("/{payment_id}", response_model=Payment)
async def delete_payment(payment_id: int, service: PaymentService = Depends(payment_service)):
    return service.delete(payment_id)
