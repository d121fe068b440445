"""Resource services: validation and referential rules per entity.

Transport independent. Every method either returns records or raises
an ``ApiError`` subclass; the HTTP layer only maps those to responses.
"""

import logging
from typing import ClassVar, Optional

from pydantic import BaseModel

from . import messages
from .dashboard import round_half_up
from .errors import NotFound, ValidationFailed
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
from .storage import EntityKind, EntityStore

logger = logging.getLogger(__name__)


def clamp_progress(value: float) -> int:
    """Clamp a progress percentage to [0, 100], rounding halves up."""
    return round_half_up(max(0.0, min(100.0, value)))


class ResourceService:
    """Create/list/update/delete for one entity kind.

    Subclasses declare which fields are required. ``required`` fields must
    be truthy on create (empty strings and id 0 are rejected); ``numeric``
    fields only need to be present, so an amount of 0 is fine. On update
    an explicit null is ignored for both, and clears any other field.
    """

    kind: ClassVar[EntityKind]
    record_cls: ClassVar[type[BaseModel]]
    required: ClassVar[tuple[str, ...]] = ()
    numeric: ClassVar[tuple[str, ...]] = ()
    missing_message: ClassVar[str] = messages.INVALID_REQUEST
    not_found_message: ClassVar[str] = messages.NOT_FOUND

    def __init__(self, store: EntityStore):
        self.store = store

    # --- hooks ---

    @property
    def lock_kinds(self) -> tuple[EntityKind, ...]:
        """Collections read or written while validating a write."""
        return (self.kind,)

    def _validate(self, values: dict, current: Optional[BaseModel] = None) -> None:
        """Check references and uniqueness; ``current`` is set on update."""

    def _prepare(self, values: dict) -> dict:
        return values

    # --- operations ---

    def list(self) -> list:
        return self.store.list(self.kind)

    def get(self, record_id: int) -> BaseModel:
        record = self.store.find(self.kind, record_id)
        if record is None:
            raise NotFound(self.not_found_message)
        return record

    def create(self, data: BaseModel) -> BaseModel:
        values = {k: v for k, v in data.model_dump().items() if v is not None}
        self._check_required(values)

        with self.store.locked(*self.lock_kinds):
            self._validate(values)
            record = self.record_cls(**self._prepare(values))
            self.store.insert(self.kind, record)

        logger.info(f"Created {self.kind.value} #{record.id}")
        return record

    def update(self, record_id: int, data: BaseModel) -> BaseModel:
        values = data.model_dump(exclude_unset=True)

        with self.store.locked(*self.lock_kinds):
            current = self.get(record_id)
            self._validate(values, current)
            patch = {
                field: value
                for field, value in values.items()
                if value is not None or field not in self._non_nullable
            }
            record = self.store.update(self.kind, record_id, self._prepare(patch))

        logger.info(f"Updated {self.kind.value} #{record_id}: {sorted(patch)}")
        return record

    def delete(self, record_id: int) -> BaseModel:
        with self.store.locked(*self.lock_kinds):
            record = self.store.remove(self.kind, record_id)
        if record is None:
            raise NotFound(self.not_found_message)
        logger.info(f"Deleted {self.kind.value} #{record_id}")
        return record

    # --- helpers ---

    @property
    def _non_nullable(self) -> set[str]:
        fields = self.record_cls.model_fields
        return set(self.required) | set(self.numeric) | {
            name for name, info in fields.items()
            if name != "id" and info.default is not None
        }

    def _check_required(self, values: dict) -> None:
        missing = [f for f in self.required if not values.get(f)]
        missing += [f for f in self.numeric if values.get(f) is None]
        if missing:
            logger.warning(f"Rejected {self.kind.value}: missing {missing}")
            raise ValidationFailed(self.missing_message)


class ClientService(ResourceService):
    """Clients are create + list only; there is no update or delete."""

    kind = EntityKind.CLIENTS
    record_cls = Client
    required = ("name",)
    missing_message = messages.CLIENT_NAME_REQUIRED


class ProjectService(ResourceService):
    kind = EntityKind.PROJECTS
    record_cls = Project
    required = ("code", "name", "client_id")
    missing_message = messages.PROJECT_FIELDS_REQUIRED
    not_found_message = messages.PROJECT_NOT_FOUND

    @property
    def lock_kinds(self):
        return (EntityKind.CLIENTS, EntityKind.PROJECTS, EntityKind.STATEMENTS)

    def _validate(self, values, current=None):
        if "client_id" in values:
            client_id = values["client_id"]
            if client_id is None or self.store.find(EntityKind.CLIENTS, client_id) is None:
                logger.warning(f"Rejected project: unknown client {client_id}")
                raise ValidationFailed(messages.CLIENT_NOT_FOUND)

        code = values.get("code")
        if code is not None:
            for project in self.store.list(EntityKind.PROJECTS):
                if project.code == code and (current is None or project.id != current.id):
                    logger.warning(f"Rejected project: duplicate code {code!r}")
                    raise ValidationFailed(messages.PROJECT_CODE_TAKEN)

    def _prepare(self, values):
        if values.get("progress") is not None:
            values["progress"] = clamp_progress(values["progress"])
        return values

    def _with_client(self, project: Project) -> ProjectWithClient:
        client = self.store.find(EntityKind.CLIENTS, project.client_id)
        return ProjectWithClient(**project.model_dump(), client=client)

    def list(self) -> list[ProjectWithClient]:
        with self.store.locked(EntityKind.CLIENTS, EntityKind.PROJECTS):
            return [self._with_client(p) for p in self.store.list(self.kind)]

    def get_joined(self, record_id: int) -> ProjectWithClient:
        with self.store.locked(EntityKind.CLIENTS, EntityKind.PROJECTS):
            return self._with_client(self.get(record_id))

    def delete(self, record_id: int) -> Project:
        """Delete a project together with all of its statements."""
        with self.store.locked(*self.lock_kinds):
            if self.store.find(self.kind, record_id) is None:
                raise NotFound(self.not_found_message)
            statements = self.store.remove_where(
                EntityKind.STATEMENTS, lambda s: s.project_id == record_id
            )
            record = self.store.remove(self.kind, record_id)

        logger.info(
            f"Deleted projects #{record_id} and {len(statements)} statement(s)"
        )
        return record


class StatementService(ResourceService):
    kind = EntityKind.STATEMENTS
    record_cls = Statement
    required = ("project_id", "number", "date")
    numeric = ("amount",)
    missing_message = messages.STATEMENT_FIELDS_REQUIRED
    not_found_message = messages.STATEMENT_NOT_FOUND

    @property
    def lock_kinds(self):
        return (EntityKind.PROJECTS, EntityKind.STATEMENTS)

    def _validate(self, values, current=None):
        if "project_id" in values:
            project_id = values["project_id"]
            if project_id is None or self.store.find(EntityKind.PROJECTS, project_id) is None:
                logger.warning(f"Rejected statement: unknown project {project_id}")
                raise ValidationFailed(messages.STATEMENT_PROJECT_NOT_FOUND)

    def list(self) -> list[StatementWithProject]:
        with self.store.locked(EntityKind.PROJECTS, EntityKind.STATEMENTS):
            return [
                StatementWithProject(
                    **s.model_dump(),
                    project=self.store.find(EntityKind.PROJECTS, s.project_id),
                )
                for s in self.store.list(self.kind)
            ]


class SupplierService(ResourceService):
    kind = EntityKind.SUPPLIERS
    record_cls = Supplier
    required = ("company_name",)
    missing_message = messages.SUPPLIER_NAME_REQUIRED
    not_found_message = messages.SUPPLIER_NOT_FOUND


class EmployeeService(ResourceService):
    kind = EntityKind.EMPLOYEES
    record_cls = Employee
    required = ("name", "job_title", "specialization")
    numeric = ("daily_wage",)
    missing_message = messages.EMPLOYEE_FIELDS_REQUIRED
    not_found_message = messages.EMPLOYEE_NOT_FOUND


class EquipmentService(ResourceService):
    kind = EntityKind.EQUIPMENT
    record_cls = Equipment
    required = ("name", "type")
    numeric = ("daily_cost",)
    missing_message = messages.EQUIPMENT_FIELDS_REQUIRED
    not_found_message = messages.EQUIPMENT_NOT_FOUND


class PaymentService(ResourceService):
    kind = EntityKind.PAYMENTS
    record_cls = Payment
    required = ("type", "date", "payment_method", "status")
    numeric = ("amount",)
    missing_message = messages.PAYMENT_FIELDS_REQUIRED
    not_found_message = messages.PAYMENT_NOT_FOUND
