"""Head-tag metadata and breadcrumbs for detail pages."""

from fastapi import APIRouter, HTTPException

from consultancy import seo, storage

router = APIRouter()


@router.get("/seo/services/{identifier}")
async def service_page(identifier: str):
    """Metadata, canonical path, and breadcrumbs for a service detail page."""
    service = storage.get_service_by_identifier(identifier)
    if not service:
        raise HTTPException(404, "Service not found")
    return seo.service_page(service)


@router.get("/seo/training-programs/{identifier}")
async def training_program_page(identifier: str):
    """Metadata, canonical path, and breadcrumbs for a training program page."""
    program = storage.get_training_program(identifier)
    if not program:
        raise HTTPException(404, "Training program not found")
    return seo.training_program_page(program)


@router.get("/seo/pages/{page}")
async def section_page(page: str):
    """Metadata and breadcrumbs for a top-level section (home, about, contact, ...)."""
    try:
        trail = seo.breadcrumbs(page)
    except ValueError as e:
        raise HTTPException(404, str(e))
    path = trail[-1]["url"]
    title = trail[-1]["name"] if page != "home" else ""
    return {"path": path, "meta": seo.page_metadata(title, None, path), "breadcrumbs": trail}
