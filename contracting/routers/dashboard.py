"""
Dashboard API Endpoints

Aggregations are recomputed from the store on every request.
"""

from typing import List

from fastapi import APIRouter, Depends

from .. import dashboard
from ..deps import get_store
from ..sample_data import MonthlyPerformance, SampleDataProvider
from ..storage import EntityKind, EntityStore

router = APIRouter()


@router.get("/projects", response_model=dashboard.ProjectOverview)
async def project_overview(store: EntityStore = Depends(get_store)):
    """Project counts per status, average progress and top contracts"""
    return dashboard.project_overview(store.list(EntityKind.PROJECTS))


@router.get("/labor", response_model=List[dashboard.LaborShare])
async def labor_distribution(store: EntityStore = Depends(get_store)):
    """Active employees grouped by specialization"""
    return dashboard.labor_distribution(store.list(EntityKind.EMPLOYEES))


@router.get("/profit-loss", response_model=dashboard.ProfitLoss)
async def profit_loss(store: EntityStore = Depends(get_store)):
    return dashboard.profit_loss(
        statements=store.list(EntityKind.STATEMENTS),
        payments=store.list(EntityKind.PAYMENTS),
        employees=store.list(EntityKind.EMPLOYEES),
        equipment=store.list(EntityKind.EQUIPMENT),
        projects=store.list(EntityKind.PROJECTS),
    )


@router.get("/monthly-performance", response_model=MonthlyPerformance)
async def monthly_performance():
    """Placeholder series, flagged with ``sample: true``"""
    return SampleDataProvider().monthly_performance()
