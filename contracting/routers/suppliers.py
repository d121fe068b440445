"""
Suppliers API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import supplier_service
from ..models import Supplier, SupplierIn
from ..service import SupplierService

router = APIRouter()


@router.get("", response_model=List[Supplier])
async def list_suppliers(service: SupplierService = Depends(supplier_service)):
    """List all suppliers"""
    return service.list()


@router.post("", response_model=Supplier, status_code=201)
async def create_supplier(data: SupplierIn, service: SupplierService = Depends(supplier_service)):
    """Create a supplier (balance defaults to 0)"""
    return service.create(data)


@router.patch("/{supplier_id}", response_model=Supplier)
async def update_supplier(
    supplier_id: int,
    data: SupplierIn,
    service: SupplierService = Depends(supplier_service),
):
    return service.update(supplier_id, data)


@router.delete("/{supplier_id}", response_model=Supplier)
async def delete_supplier(supplier_id: int, service: SupplierService = Depends(supplier_service)):
    return service.delete(supplier_id)
