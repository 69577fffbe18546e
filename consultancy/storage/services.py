"""Service CRUD. Services are addressed by id; their slugs are derived from the title on demand."""

from typing import Any

from consultancy.slugs import generate_slug, is_valid_slug

from .core import find_by_id, is_numeric_id, load_collection, next_id, save_collection

COLLECTION = "services"


def list_services() -> list[dict[str, Any]]:
    return load_collection(COLLECTION)


def get_service(service_id: int) -> dict[str, Any] | None:
    return find_by_id(load_collection(COLLECTION), service_id)


def service_slug(service: dict[str, Any]) -> str:
    """Slug of the service title, or "" when the title has no sluggable characters.

    All-digit slugs get a "service-" prefix so they never read as an id.
    """
    slug = generate_slug(service["title"])
    if is_numeric_id(slug):
        return f"service-{slug}"
    return slug


def get_service_by_identifier(identifier: str) -> dict[str, Any] | None:
    """Look up a service by numeric id or by service_slug()."""
    if is_numeric_id(identifier):
        return get_service(int(identifier))
    if not is_valid_slug(identifier):
        return None
    for service in load_collection(COLLECTION):
        if service_slug(service) == identifier:
            return service
    return None


def create_service(
    title: str, description: str, icon: str, features: list[str]
) -> dict[str, Any]:
    services = load_collection(COLLECTION)
    service = {
        "id": next_id(services),
        "title": title,
        "description": description,
        "icon": icon,
        "features": list(features),
    }
    services.append(service)
    save_collection(COLLECTION, services)
    return service


def update_service(service_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Update service fields (title, description, icon, features). Returns updated service."""
    services = load_collection(COLLECTION)
    service = find_by_id(services, service_id)
    if service is None:
        return None
    allowed = {"title", "description", "icon", "features"}
    updates = {k: v for k, v in fields.items() if k in allowed}
    if not updates:
        raise ValueError("No valid fields to update")
    service.update(updates)
    save_collection(COLLECTION, services)
    return service


def delete_service(service_id: int) -> bool:
    services = load_collection(COLLECTION)
    remaining = [s for s in services if s["id"] != service_id]
    if len(remaining) == len(services):
        return False
    save_collection(COLLECTION, remaining)
    return True
