"""
Projects API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import project_service
from ..models import Project, ProjectIn, ProjectWithClient
from ..service import ProjectService

router = APIRouter()


@router.get("", response_model=List[ProjectWithClient])
async def list_projects(service: ProjectService = Depends(project_service)):
    """List all projects with their client attached"""
    return service.list()


@router.get("/{project_id}", response_model=ProjectWithClient)
async def get_project(project_id: int, service: ProjectService = Depends(project_service)):
    """Get a specific project with its client"""
    return service.get_joined(project_id)


@router.post("", response_model=Project, status_code=201)
async def create_project(data: ProjectIn, service: ProjectService = Depends(project_service)):
    """Create a project for an existing client.

    The code must be unique, progress is clamped to 0..100.
    """
    return service.create(data)


@router.patch("/{project_id}", response_model=Project)
async def update_project(
    project_id: int,
    data: ProjectIn,
    service: ProjectService = Depends(project_service),
):
    """Update only the fields present in the body"""
    return service.update(project_id, data)


@router.delete("/{project_id}", response_model=Project)
async def delete_project(project_id: int, service: ProjectService = Depends(project_service)):
    """Delete a project and all of its statements"""
    return service.delete(project_id)
