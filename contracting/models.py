"""Pydantic models for the Contracting Management API.

Field names are snake_case in Python and camelCase on the wire
(``contactPerson``, ``clientId``, ...), matching the dashboard frontend.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model: camelCase aliases, accepts both spellings on input."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


# --- Enumerations ---


class ProjectStatus(str, Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ON_HOLD = "ON_HOLD"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class EquipmentStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    MAINTENANCE = "MAINTENANCE"


class StatementStatus(str, Enum):
    """Billing state of a statement (payment extract)."""

    PENDING = "PENDING"
    REVIEW = "REVIEW"
    PAID = "PAID"


class PaymentType(str, Enum):
    INCOMING = "INCOMING"
    OUTGOING = "OUTGOING"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CHECK = "CHECK"


class PaymentStatus(str, Enum):
    COMPLETED = "COMPLETED"
    PENDING = "PENDING"


# --- Stored records ---


class Client(ApiModel):
    """Customer commissioning projects."""

    id: int = 0
    name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class Project(ApiModel):
    """Construction project, always owned by an existing client."""

    id: int = 0
    code: str
    name: str
    client_id: int
    status: ProjectStatus = ProjectStatus.PLANNED
    progress: int = 0  # 0..100
    budget: Optional[float] = None
    location: Optional[str] = None


class Supplier(ApiModel):
    id: int = 0
    company_name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    materials: Optional[str] = None  # free text, e.g. "steel, cement"
    payment_terms: Optional[str] = None
    balance: float = 0


class Employee(ApiModel):
    """Site worker. ``project_name`` is a label, not a link to a Project."""

    id: int = 0
    name: str
    job_title: str
    specialization: str
    daily_wage: float
    phone: Optional[str] = None
    project_name: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE


class Equipment(ApiModel):
    """Machinery item. ``project_name`` is a label, not a link to a Project."""

    id: int = 0
    name: str
    type: str
    daily_cost: float
    maintenance_date: Optional[str] = None
    project_name: Optional[str] = None
    status: EquipmentStatus = EquipmentStatus.AVAILABLE


class Statement(ApiModel):
    """Payment extract billed against a project."""

    id: int = 0
    project_id: int
    number: str
    amount: float
    date: str  # ISO date
    description: Optional[str] = None
    status: StatementStatus = StatementStatus.REVIEW


class Payment(ApiModel):
    """Cash movement in or out of the company."""

    id: int = 0
    type: PaymentType
    amount: float
    date: str  # ISO date
    due_date: Optional[str] = None
    description: Optional[str] = None
    payment_method: PaymentMethod
    status: PaymentStatus
    related_party: Optional[str] = None  # project or counterparty label


# --- Joined read models ---


class ProjectWithClient(Project):
    client: Optional[Client] = None


class StatementWithProject(Statement):
    project: Optional[Project] = None


# --- Request bodies ---
#
# Every field is optional so that required-field checks are done by the
# service layer (400 with a readable message) and the same body serves
# both POST and PATCH via model_dump(exclude_unset=True).


class ClientIn(ApiModel):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class ProjectIn(ApiModel):
    code: Optional[str] = None
    name: Optional[str] = None
    client_id: Optional[StrictInt] = None
    status: Optional[ProjectStatus] = None
    progress: Optional[StrictFloat] = None
    budget: Optional[StrictFloat] = None
    location: Optional[str] = None


class SupplierIn(ApiModel):
    company_name: Optional[str] = None
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    materials: Optional[str] = None
    payment_terms: Optional[str] = None
    balance: Optional[StrictFloat] = None


class EmployeeIn(ApiModel):
    name: Optional[str] = None
    job_title: Optional[str] = None
    specialization: Optional[str] = None
    daily_wage: Optional[StrictFloat] = None
    phone: Optional[str] = None
    project_name: Optional[str] = None
    status: Optional[EmployeeStatus] = None


class EquipmentIn(ApiModel):
    name: Optional[str] = None
    type: Optional[str] = None
    daily_cost: Optional[StrictFloat] = None
    maintenance_date: Optional[str] = None
    project_name: Optional[str] = None
    status: Optional[EquipmentStatus] = None


class StatementIn(ApiModel):
    project_id: Optional[StrictInt] = None
    number: Optional[str] = None
    amount: Optional[StrictFloat] = None
    date: Optional[str] = None
    description: Optional[str] = None
    status: Optional[StatementStatus] = None


class PaymentIn(ApiModel):
    type: Optional[PaymentType] = None
    amount: Optional[StrictFloat] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    description: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    related_party: Optional[str] = None
