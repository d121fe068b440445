"""
Clients API Endpoints

Create and list only; clients cannot be edited or removed.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import client_service
from ..models import Client, ClientIn
from ..service import ClientService

router = APIRouter()


@router.get("", response_model=List[Client])
async def list_clients(service: ClientService = Depends(client_service)):
    """List all clients"""
    return service.list()


@router.post("", response_model=Client, status_code=201)
async def create_client(data: ClientIn, service: ClientService = Depends(client_service)):
    """Create a client (name required)"""
    return service.create(data)
