"""Contact form submission and admin inbox endpoints."""

from fastapi import APIRouter, HTTPException

from consultancy import storage
from consultancy.notifications import get_notifier

from .models import ContactForm, UpdateContactStatus

router = APIRouter()


@router.post("/contact", status_code=201)
async def submit_contact(body: ContactForm):
    """Store a contact form submission and alert the team."""
    contact = storage.create_contact(
        full_name=body.name,
        email=body.email,
        subject=body.subject,
        message=body.message,
        phone=body.phone,
    )
    notification = await get_notifier().send_contact_notification(
        body.model_dump(), site_url=storage.get_config()["site_url"]
    )
    return {"id": contact["id"], "notified": notification["success"]}


@router.get("/contacts")
async def list_contacts():
    """List contact submissions, newest first."""
    return storage.list_contacts()


@router.get("/contacts/{contact_id}")
async def get_contact(contact_id: int):
    """Get a single contact submission."""
    contact = storage.get_contact(contact_id)
    if not contact:
        raise HTTPException(404, "Contact not found")
    return contact


@router.patch("/contacts/{contact_id}")
async def update_contact(contact_id: int, body: UpdateContactStatus):
    """Update the follow-up status of a submission."""
    updated = storage.update_contact_status(contact_id, body.status)
    if not updated:
        raise HTTPException(404, "Contact not found")
    return updated


@router.delete("/contacts/{contact_id}")
async def delete_contact(contact_id: int):
    """Delete a contact submission."""
    if not storage.delete_contact(contact_id):
        raise HTTPException(404, "Contact not found")
    return {"ok": True}
