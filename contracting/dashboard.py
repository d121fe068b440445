"""Dashboard aggregations.

Pure functions recomputed on every call, no caching. They take record
lists so they work on store contents as well as on collections fetched
through ``ContractingClient``.
"""

import math
from collections import Counter
from typing import Iterable, Sequence

from . import messages
from .models import (
    ApiModel,
    Employee,
    EmployeeStatus,
    Equipment,
    EquipmentStatus,
    Payment,
    PaymentType,
    Project,
    ProjectStatus,
    Statement,
    StatementStatus,
)

MONTHLY_DAYS = 30  # daily rates are projected to a 30-day month
ADMIN_SHARE = 0.2  # residual expenses split admin/other 20/80 (estimate)


class ProjectStats(ApiModel):
    total: int = 0
    planned: int = 0
    in_progress: int = 0
    completed: int = 0
    on_hold: int = 0
    avg_progress: int = 0


class LaborShare(ApiModel):
    specialization: str
    count: int


class ExpenseDistribution(ApiModel):
    materials: float = 0
    labor: float = 0
    equipment: float = 0
    admin: float = 0
    other: float = 0


class ProfitLoss(ApiModel):
    revenue: float = 0
    expenses: float = 0
    labor_cost: float = 0
    equipment_cost: float = 0
    contract_value: float = 0
    net_profit: float = 0
    profit_margin: float = 0
    paid_statements: float = 0
    pending_statements: float = 0
    expense_distribution: ExpenseDistribution = ExpenseDistribution()


class ProjectValue(ApiModel):
    name: str
    value: float


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def project_stats(projects: Sequence[Project]) -> ProjectStats:
    """Count projects per status and average their progress."""
    total = len(projects)
    by_status = Counter(p.status for p in projects)
    avg = 0
    if total:
        avg = round_half_up(sum(p.progress or 0 for p in projects) / total)

    return ProjectStats(
        total=total,
        planned=by_status[ProjectStatus.PLANNED],
        in_progress=by_status[ProjectStatus.IN_PROGRESS],
        completed=by_status[ProjectStatus.COMPLETED],
        on_hold=by_status[ProjectStatus.ON_HOLD],
        avg_progress=avg,
    )


def project_status_shares(stats: ProjectStats) -> dict[str, float]:
    """Percentage of projects per status (0 everywhere when empty)."""
    counted = stats.planned + stats.in_progress + stats.completed + stats.on_hold
    total = counted or 1
    return {
        ProjectStatus.PLANNED.value: stats.planned / total * 100,
        ProjectStatus.IN_PROGRESS.value: stats.in_progress / total * 100,
        ProjectStatus.COMPLETED.value: stats.completed / total * 100,
        ProjectStatus.ON_HOLD.value: stats.on_hold / total * 100,
    }


def labor_distribution(employees: Iterable[Employee]) -> list[LaborShare]:
    """Active employees per specialization, largest group first.

    Blank specializations are grouped under the "unspecified" label.
    Ties keep first-seen order.
    """
    counts: Counter = Counter()
    for employee in employees:
        if employee.status != EmployeeStatus.ACTIVE:
            continue
        key = (employee.specialization or "").strip() or messages.UNSPECIFIED_SPECIALIZATION
        counts[key] += 1

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [LaborShare(specialization=k, count=v) for k, v in ranked]


def monthly_labor_cost(employees: Iterable[Employee]) -> float:
    return sum(
        e.daily_wage * MONTHLY_DAYS
        for e in employees
        if e.status == EmployeeStatus.ACTIVE
    )


def monthly_equipment_cost(equipment: Iterable[Equipment]) -> float:
    return sum(
        eq.daily_cost * MONTHLY_DAYS
        for eq in equipment
        if eq.status == EquipmentStatus.IN_USE
    )


def _statement_total(statements: Iterable[Statement], status: StatementStatus) -> float:
    return sum(s.amount for s in statements if s.status == status)


def profit_loss(
    statements: Sequence[Statement],
    payments: Sequence[Payment],
    employees: Sequence[Employee],
    equipment: Sequence[Equipment],
    projects: Sequence[Project] = (),
) -> ProfitLoss:
    """Profit and loss summary.

    Revenue is what was collected on PAID statements, expenses are all
    OUTGOING payments. Labor and equipment are monthly estimates and are
    not part of net profit. The admin/other split of the remaining
    expenses is a fixed 20/80 approximation and goes negative when the
    estimates exceed recorded expenses.
    """
    revenue = _statement_total(statements, StatementStatus.PAID)
    outgoing = [p for p in payments if p.type == PaymentType.OUTGOING]
    expenses = sum(p.amount for p in outgoing)
    labor = monthly_labor_cost(employees)
    machinery = monthly_equipment_cost(equipment)

    materials = sum(
        p.amount for p in outgoing
        if messages.MATERIALS_KEYWORD in (p.description or "")
    )
    residual = expenses - materials - labor - machinery

    net_profit = revenue - expenses
    return ProfitLoss(
        revenue=revenue,
        expenses=expenses,
        labor_cost=labor,
        equipment_cost=machinery,
        contract_value=sum(p.budget or 0 for p in projects),
        net_profit=net_profit,
        profit_margin=net_profit / revenue * 100 if revenue > 0 else 0,
        paid_statements=revenue,
        pending_statements=_statement_total(statements, StatementStatus.PENDING),
        expense_distribution=ExpenseDistribution(
            materials=materials,
            labor=labor,
            equipment=machinery,
            admin=residual * ADMIN_SHARE,
            other=residual * (1 - ADMIN_SHARE),
        ),
    )


def top_project_values(projects: Sequence[Project], limit: int = 5) -> list[ProjectValue]:
    """Largest contracts by budget."""
    values = [ProjectValue(name=p.name, value=p.budget or 0) for p in projects]
    values.sort(key=lambda v: v.value, reverse=True)
    return values[:limit]


def recent_projects(projects: Sequence[Project], limit: int = 4) -> list[Project]:
    """Newest projects first, by id."""
    return sorted(projects, key=lambda p: p.id, reverse=True)[:limit]


class ProjectOverview(ApiModel):
    stats: ProjectStats
    shares: dict[str, float]
    top_values: list[ProjectValue]
    recent: list[Project]


def project_overview(projects: Sequence[Project]) -> ProjectOverview:
    stats = project_stats(projects)
    return ProjectOverview(
        stats=stats,
        shares=project_status_shares(stats),
        top_values=top_project_values(projects),
        recent=recent_projects(projects),
    )
