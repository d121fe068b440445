"""Async client for the Contracting Management API.

Same calls the dashboard frontend makes: list/create/update/delete per
resource, plus ``load_all()`` which fetches every collection at once.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from .models import (
    Client,
    Employee,
    Equipment,
    Payment,
    Project,
    ProjectWithClient,
    Statement,
    StatementWithProject,
    Supplier,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000/api"


class ClientError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


@dataclass
class Snapshot:
    """All collections as loaded by ``ContractingClient.load_all``."""

    projects: list[ProjectWithClient] = field(default_factory=list)
    clients: list[Client] = field(default_factory=list)
    statements: list[StatementWithProject] = field(default_factory=list)
    suppliers: list[Supplier] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    equipment: list[Equipment] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)


class ContractingClient:
    """Thin wrapper around ``httpx.AsyncClient``.

    Use as an async context manager, or pass an existing ``httpx.AsyncClient``
    (tests hand in one with a mock transport).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = http or httpx.AsyncClient(timeout=timeout)
        self._owns_http = http is None

    async def __aenter__(self) -> "ContractingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _request(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        resp = await self._http.request(method, f"{self.base_url}{path}", json=body)
        if resp.status_code >= 400:
            try:
                message = resp.json().get("message", resp.text)
            except ValueError:
                message = resp.text
            logger.error(f"{method} {path} failed: {resp.status_code} {message}")
            raise ClientError(resp.status_code, message)
        return resp.json()

    async def _list(self, path: str, model: type[BaseModel]) -> list:
        return [model.model_validate(item) for item in await self._request("GET", path)]

    async def _create(self, path: str, data: dict, model: type[BaseModel]):
        return model.model_validate(await self._request("POST", path, data))

    async def _update(self, path: str, record_id: int, data: dict, model: type[BaseModel]):
        return model.model_validate(await self._request("PATCH", f"{path}/{record_id}", data))

    async def _delete(self, path: str, record_id: int) -> None:
        await self._request("DELETE", f"{path}/{record_id}")

    # --- Projects ---

    async def get_projects(self) -> list[ProjectWithClient]:
        return await self._list("/projects", ProjectWithClient)

    async def get_project(self, project_id: int) -> ProjectWithClient:
        return ProjectWithClient.model_validate(
            await self._request("GET", f"/projects/{project_id}")
        )

    async def create_project(self, data: dict) -> Project:
        return await self._create("/projects", data, Project)

    async def update_project(self, project_id: int, data: dict) -> Project:
        return await self._update("/projects", project_id, data, Project)

    async def delete_project(self, project_id: int) -> None:
        await self._delete("/projects", project_id)

    # --- Clients ---

    async def get_clients(self) -> list[Client]:
        return await self._list("/clients", Client)

    async def create_client(self, data: dict) -> Client:
        return await self._create("/clients", data, Client)

    # --- Statements ---

    async def get_statements(self) -> list[StatementWithProject]:
        return await self._list("/statements", StatementWithProject)

    async def create_statement(self, data: dict) -> Statement:
        return await self._create("/statements", data, Statement)

    async def update_statement(self, statement_id: int, data: dict) -> Statement:
        return await self._update("/statements", statement_id, data, Statement)

    async def delete_statement(self, statement_id: int) -> None:
        await self._delete("/statements", statement_id)

    # --- Suppliers ---

    async def get_suppliers(self) -> list[Supplier]:
        return await self._list("/suppliers", Supplier)

    async def create_supplier(self, data: dict) -> Supplier:
        return await self._create("/suppliers", data, Supplier)

    async def update_supplier(self, supplier_id: int, data: dict) -> Supplier:
        return await self._update("/suppliers", supplier_id, data, Supplier)

    async def delete_supplier(self, supplier_id: int) -> None:
        await self._delete("/suppliers", supplier_id)

    # --- Employees ---

    async def get_employees(self) -> list[Employee]:
        return await self._list("/employees", Employee)

    async def create_employee(self, data: dict) -> Employee:
        return await self._create("/employees", data, Employee)

    async def update_employee(self, employee_id: int, data: dict) -> Employee:
        return await self._update("/employees", employee_id, data, Employee)

    async def delete_employee(self, employee_id: int) -> None:
        await self._delete("/employees", employee_id)

    # --- Equipment ---

    async def get_equipment(self) -> list[Equipment]:
        return await self._list("/equipment", Equipment)

    async def create_equipment(self, data: dict) -> Equipment:
        return await self._create("/equipment", data, Equipment)

    async def update_equipment(self, equipment_id: int, data: dict) -> Equipment:
        return await self._update("/equipment", equipment_id, data, Equipment)

    async def delete_equipment(self, equipment_id: int) -> None:
        await self._delete("/equipment", equipment_id)

    # --- Payments ---

    async def get_payments(self) -> list[Payment]:
        return await self._list("/payments", Payment)

    async def create_payment(self, data: dict) -> Payment:
        return await self._create("/payments", data, Payment)

    async def update_payment(self, payment_id: int, data: dict) -> Payment:
        return await self._update("/payments", payment_id, data, Payment)

    async def delete_payment(self, payment_id: int) -> None:
        await self._delete("/payments", payment_id)

    # --- Bulk ---

    async def load_all(self) -> Snapshot:
        """Fetch every collection concurrently; no ordering between them."""
        results = await asyncio.gather(
            self.get_projects(),
            self.get_clients(),
            self.get_statements(),
            self.get_suppliers(),
            self.get_employees(),
            self.get_equipment(),
            self.get_payments(),
        )
        return Snapshot(*results)
