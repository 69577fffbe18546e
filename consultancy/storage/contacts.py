"""Contact form submissions and their follow-up status."""

from datetime import datetime, timezone
from typing import Any

from .core import find_by_id, load_collection, next_id, save_collection

COLLECTION = "contacts"
CONTACT_STATUSES = ("pending", "read", "responded")


def list_contacts() -> list[dict[str, Any]]:
    """Newest first."""
    return sorted(load_collection(COLLECTION), key=lambda c: (c["created_at"], c["id"]), reverse=True)


def get_contact(contact_id: int) -> dict[str, Any] | None:
    return find_by_id(load_collection(COLLECTION), contact_id)


def create_contact(
    full_name: str,
    email: str,
    subject: str,
    message: str,
    phone: str | None = None,
) -> dict[str, Any]:
    contacts = load_collection(COLLECTION)
    contact = {
        "id": next_id(contacts),
        "full_name": full_name,
        "email": email,
        "phone": phone,
        "subject": subject,
        "message": message,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "status": "pending",
    }
    contacts.append(contact)
    save_collection(COLLECTION, contacts)
    return contact


def update_contact_status(contact_id: int, status: str) -> dict[str, Any] | None:
    if status not in CONTACT_STATUSES:
        raise ValueError(f"Unknown contact status '{status}'")
    contacts = load_collection(COLLECTION)
    contact = find_by_id(contacts, contact_id)
    if contact is None:
        return None
    contact["status"] = status
    save_collection(COLLECTION, contacts)
    return contact


def delete_contact(contact_id: int) -> bool:
    contacts = load_collection(COLLECTION)
    remaining = [c for c in contacts if c["id"] != contact_id]
    if len(remaining) == len(contacts):
        return False
    save_collection(COLLECTION, remaining)
    return True
