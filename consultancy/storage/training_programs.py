"""Training program CRUD with unique, SEO-friendly slugs.

A program is addressable by numeric id or by slug. The slug is taken from the
request when given (it must already be valid), otherwise generated from the
title. Collisions get a numeric suffix: "gst-basics", "gst-basics-1", ...
Titles with no sluggable characters fall back to "program-<id>".
"""

import logging
from typing import Any

from consultancy.slugs import generate_slug, is_valid_slug

from .core import find_by_id, is_numeric_id, load_collection, next_id, save_collection

logger = logging.getLogger(__name__)

COLLECTION = "training-programs"
DELIVERY_MODES = ("online", "offline", "both")


def list_training_programs() -> list[dict[str, Any]]:
    return load_collection(COLLECTION)


def get_training_program(identifier: str | int) -> dict[str, Any] | None:
    """Look up a program by numeric id or slug. Malformed identifiers return None."""
    programs = load_collection(COLLECTION)
    if isinstance(identifier, int):
        return find_by_id(programs, identifier)
    if is_numeric_id(identifier):
        return find_by_id(programs, int(identifier))
    if not is_valid_slug(identifier):
        return None
    for program in programs:
        if program["slug"] == identifier:
            return program
    return None


def _unique_slug(programs: list[dict[str, Any]], slug: str, exclude_id: int | None = None) -> str:
    taken = {p["slug"] for p in programs if p["id"] != exclude_id}
    candidate = slug
    counter = 1
    while candidate in taken:
        candidate = f"{slug}-{counter}"
        counter += 1
    return candidate


def _resolve_slug(
    programs: list[dict[str, Any]],
    program_id: int,
    title: str,
    slug: str | None,
) -> str:
    if slug:
        if not is_valid_slug(slug):
            raise ValueError(
                f"Invalid slug '{slug}': use only lowercase letters, numbers, and single hyphens"
            )
        if is_numeric_id(slug):
            raise ValueError(f"Slug '{slug}' would be read as a program id")
        base = slug
    else:
        base = generate_slug(title)
        if not base:
            base = f"program-{program_id}"
            logger.warning(f"Title {title!r} has no sluggable characters, using '{base}'")
        elif is_numeric_id(base):
            base = f"program-{base}"
    return _unique_slug(programs, base, exclude_id=program_id)


def _resolve_pricing(
    price: int | None,
    online_price: int | None,
    offline_price: int | None,
    delivery_mode: str | None,
) -> dict[str, Any]:
    if online_price or offline_price:
        online = online_price or 0
        mode = delivery_mode or "both"
        if mode not in DELIVERY_MODES:
            raise ValueError(f"Unknown delivery mode '{mode}'")
        return {
            "price": online,
            "online_price": online,
            "offline_price": offline_price or 0,
            "delivery_mode": mode,
        }
    if price:
        # Legacy single price applies to both delivery modes
        return {
            "price": price,
            "online_price": price,
            "offline_price": price,
            "delivery_mode": "both",
        }
    raise ValueError("Either price or online_price/offline_price is required")


def create_training_program(
    title: str,
    description: str,
    category: str,
    duration: str,
    *,
    slug: str | None = None,
    price: int | None = None,
    online_price: int | None = None,
    offline_price: int | None = None,
    delivery_mode: str | None = None,
    image_path: str | None = None,
) -> dict[str, Any]:
    programs = load_collection(COLLECTION)
    program_id = next_id(programs)
    program = {
        "id": program_id,
        "title": title,
        "slug": _resolve_slug(programs, program_id, title, slug),
        "description": description,
        "category": category,
        "duration": duration,
        **_resolve_pricing(price, online_price, offline_price, delivery_mode),
        "image_path": image_path,
    }
    programs.append(program)
    save_collection(COLLECTION, programs)
    return program


def update_training_program(program_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Update program fields. An empty slug is regenerated from the title.

    The slug is kept when only the title changes so existing links stay valid.
    """
    programs = load_collection(COLLECTION)
    program = find_by_id(programs, program_id)
    if program is None:
        return None
    allowed = {
        "title", "description", "category", "duration", "slug",
        "price", "online_price", "offline_price", "delivery_mode", "image_path",
    }
    updates = {k: v for k, v in fields.items() if k in allowed}
    if not updates:
        raise ValueError("No valid fields to update")
    if "delivery_mode" in updates and updates["delivery_mode"] not in DELIVERY_MODES:
        raise ValueError(f"Unknown delivery mode '{updates['delivery_mode']}'")

    if "slug" in updates:
        title = updates.get("title", program["title"])
        updates["slug"] = _resolve_slug(programs, program_id, title, updates["slug"])

    program.update(updates)
    save_collection(COLLECTION, programs)
    return program


def delete_training_program(program_id: int) -> bool:
    """Delete a program. Refuses while participants are enrolled in it."""
    from .participants import list_participants

    programs = load_collection(COLLECTION)
    if find_by_id(programs, program_id) is None:
        return False
    enrolled = [p for p in list_participants() if p["training_program_id"] == program_id]
    if enrolled:
        raise ValueError(
            f"Cannot delete training program: {len(enrolled)} participants are enrolled in this program"
        )
    save_collection(COLLECTION, [p for p in programs if p["id"] != program_id])
    return True
