"""Participant CRUD endpoints (admin)."""

from fastapi import APIRouter, HTTPException

from consultancy import storage

from .models import CreateParticipant, UpdateParticipant

router = APIRouter()


@router.get("/participants")
async def list_participants():
    """List all participants."""
    return storage.list_participants()


@router.post("/participants", status_code=201)
async def create_participant(body: CreateParticipant):
    """Enroll a participant in a training program."""
    try:
        return storage.create_participant(**body.model_dump())
    except FileExistsError as e:
        raise HTTPException(409, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.get("/participants/{participant_pk}")
async def get_participant(participant_pk: int):
    """Get a single participant."""
    participant = storage.get_participant(participant_pk)
    if not participant:
        raise HTTPException(404, "Participant not found")
    return participant


@router.patch("/participants/{participant_pk}")
async def update_participant(participant_pk: int, body: UpdateParticipant):
    """Update participant fields."""
    try:
        updated = storage.update_participant(participant_pk, body.model_dump(exclude_none=True))
    except FileExistsError as e:
        raise HTTPException(409, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Participant not found")
    return updated


@router.delete("/participants/{participant_pk}")
async def delete_participant(participant_pk: int):
    """Delete a participant without issued certificates."""
    try:
        deleted = storage.delete_participant(participant_pk)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not deleted:
        raise HTTPException(404, "Participant not found")
    return {"ok": True}
