"""
Statements API Endpoints

Statements are payment extracts billed against a project.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import statement_service
from ..models import Statement, StatementIn, StatementWithProject
from ..service import StatementService

router = APIRouter()


@router.get("", response_model=List[StatementWithProject])
async def list_statements(service: StatementService = Depends(statement_service)):
    """List all statements with their project attached"""
    return service.list()


@router.post("", response_model=Statement, status_code=201)
async def create_statement(data: StatementIn, service: StatementService = Depends(statement_service)):
    return service.create(data)


@router.patch("/{statement_id}", response_model=Statement)
async def update_statement(
    statement_id: int,
    data: StatementIn,
    service: StatementService = Depends(statement_service),
):
    return service.update(statement_id, data)


@router.delete("/{statement_id}", response_model=Statement)
async def delete_statement(statement_id: int, service: StatementService = Depends(statement_service)):
    return service.delete(statement_id)
