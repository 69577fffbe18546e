"""Service CRUD endpoints."""

from fastapi import APIRouter, HTTPException

from consultancy import storage

from .models import CreateService, UpdateService

router = APIRouter()


@router.get("/services")
async def list_services():
    """List all services."""
    return storage.list_services()


@router.post("/services", status_code=201)
async def create_service(body: CreateService):
    """Create a new service."""
    return storage.create_service(body.title, body.description, body.icon, body.features)


@router.get("/services/{identifier}")
async def get_service(identifier: str):
    """Get a single service by id or title slug."""
    service = storage.get_service_by_identifier(identifier)
    if not service:
        raise HTTPException(404, "Service not found")
    return service


@router.patch("/services/{service_id}")
async def update_service(service_id: int, body: UpdateService):
    """Update service fields (title, description, icon, features)."""
    try:
        updated = storage.update_service(service_id, body.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Service not found")
    return updated


@router.delete("/services/{service_id}")
async def delete_service(service_id: int):
    """Delete a service."""
    if not storage.delete_service(service_id):
        raise HTTPException(404, "Service not found")
    return {"ok": True}
