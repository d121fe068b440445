"""FastAPI dependencies: the entity store and the services built on it."""

from typing import Optional

from fastapi import Depends, HTTPException

from .service import (
    ClientService,
    EmployeeService,
    EquipmentService,
    PaymentService,
    ProjectService,
    StatementService,
    SupplierService,
)
from .storage import EntityStore

_store: Optional[EntityStore] = None


def set_store(store: Optional[EntityStore]) -> None:
    global _store
    _store = store


def current_store() -> Optional[EntityStore]:
    return _store


def get_store() -> EntityStore:
    """Store for the current request. Overridable in tests."""
    if _store is None:
        raise HTTPException(503, "Store not initialized")
    return _store


def client_service(store: EntityStore = Depends(get_store)) -> ClientService:
    return ClientService(store)


def project_service(store: EntityStore = Depends(get_store)) -> ProjectService:
    return ProjectService(store)


def statement_service(store: EntityStore = Depends(get_store)) -> StatementService:
    return StatementService(store)


def supplier_service(store: EntityStore = Depends(get_store)) -> SupplierService:
    return SupplierService(store)


def employee_service(store: EntityStore = Depends(get_store)) -> EmployeeService:
    return EmployeeService(store)


def equipment_service(store: EntityStore = Depends(get_store)) -> EquipmentService:
    return EquipmentService(store)


def payment_service(store: EntityStore = Depends(get_store)) -> PaymentService:
    return PaymentService(store)
