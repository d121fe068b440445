"""
Equipment API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import equipment_service
from ..models import Equipment, EquipmentIn
from ..service import EquipmentService

router = APIRouter()


@router.get("", response_model=List[Equipment])
async def list_equipment(service: EquipmentService = Depends(equipment_service)):
    return service.list()


@router.post("", response_model=Equipment, status_code=201)
async def create_equipment(data: EquipmentIn, service: EquipmentService = Depends(equipment_service)):
    """Register equipment; dailyCost is the daily rental cost"""
    return service.create(data)


@router.patch("/{equipment_id}", response_model=Equipment)
async def update_equipment(
    equipment_id: int,
    data: EquipmentIn,
    service: EquipmentService = Depends(equipment_service),
):
    return service.update(equipment_id, data)


@router.delete("/{equipment_id}", response_model=Equipment)
async def delete_equipment(equipment_id: int, service: EquipmentService = Depends(equipment_service)):
    return service.delete(equipment_id)
