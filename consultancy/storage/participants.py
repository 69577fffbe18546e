"""Participant (trainee) CRUD."""

from datetime import datetime, timezone
from typing import Any

from .core import find_by_id, load_collection, next_id, save_collection

COLLECTION = "participants"


def list_participants() -> list[dict[str, Any]]:
    return load_collection(COLLECTION)


def get_participant(participant_pk: int) -> dict[str, Any] | None:
    return find_by_id(load_collection(COLLECTION), participant_pk)


def find_participant(
    participant_id: str | None = None, email: str | None = None
) -> dict[str, Any] | None:
    """Find a participant by public participant code, or by email when no code is given."""
    for participant in load_collection(COLLECTION):
        if participant_id:
            if participant["participant_id"] == participant_id:
                return participant
        elif email and participant["email"].lower() == email.lower():
            return participant
    return None


def create_participant(
    participant_id: str,
    full_name: str,
    email: str,
    training_program_id: int,
    phone: str | None = None,
    enrollment_date: str | None = None,
    status: str = "active",
) -> dict[str, Any]:
    from .training_programs import get_training_program

    participants = load_collection(COLLECTION)
    if any(p["participant_id"] == participant_id for p in participants):
        raise FileExistsError(f"Participant '{participant_id}' already exists")
    if get_training_program(training_program_id) is None:
        raise ValueError(f"Training program {training_program_id} does not exist")
    participant = {
        "id": next_id(participants),
        "participant_id": participant_id,
        "full_name": full_name,
        "email": email,
        "phone": phone,
        "training_program_id": training_program_id,
        "enrollment_date": enrollment_date or datetime.now(timezone.utc).isoformat(),
        "status": status,
    }
    participants.append(participant)
    save_collection(COLLECTION, participants)
    return participant


def update_participant(participant_pk: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    from .training_programs import get_training_program

    participants = load_collection(COLLECTION)
    participant = find_by_id(participants, participant_pk)
    if participant is None:
        return None
    allowed = {
        "participant_id", "full_name", "email", "phone",
        "training_program_id", "enrollment_date", "status",
    }
    updates = {k: v for k, v in fields.items() if k in allowed}
    if not updates:
        raise ValueError("No valid fields to update")
    new_code = updates.get("participant_id")
    if new_code and any(
        p["participant_id"] == new_code and p["id"] != participant_pk for p in participants
    ):
        raise FileExistsError(f"Participant '{new_code}' already exists")
    if "training_program_id" in updates and get_training_program(updates["training_program_id"]) is None:
        raise ValueError(f"Training program {updates['training_program_id']} does not exist")
    participant.update(updates)
    save_collection(COLLECTION, participants)
    return participant


def delete_participant(participant_pk: int) -> bool:
    """Delete a participant. Refuses while certificates reference them."""
    from .certificates import list_certificates

    participants = load_collection(COLLECTION)
    if find_by_id(participants, participant_pk) is None:
        return False
    issued = [c for c in list_certificates() if c["participant_id"] == participant_pk]
    if issued:
        raise ValueError(
            f"Cannot delete participant: {len(issued)} certificates have been issued to them"
        )
    save_collection(COLLECTION, [p for p in participants if p["id"] != participant_pk])
    return True
