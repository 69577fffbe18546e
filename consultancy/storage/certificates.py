"""Certificate CRUD, public verification, and participant status lookup."""

import logging
from datetime import datetime, timezone
from typing import Any

from .core import find_by_id, load_collection, next_id, save_collection
from .participants import find_participant, get_participant
from .training_programs import get_training_program

COLLECTION = "certificates"

logger = logging.getLogger(__name__)


def list_certificates() -> list[dict[str, Any]]:
    return load_collection(COLLECTION)


def get_certificate(certificate_pk: int) -> dict[str, Any] | None:
    return find_by_id(load_collection(COLLECTION), certificate_pk)


def _check_references(participant_id: int, training_program_id: int) -> None:
    if get_participant(participant_id) is None:
        raise ValueError(f"Participant {participant_id} does not exist")
    if get_training_program(training_program_id) is None:
        raise ValueError(f"Training program {training_program_id} does not exist")


def create_certificate(
    certificate_id: str,
    participant_id: int,
    training_program_id: int,
    issue_date: str,
    expiry_date: str | None = None,
    certificate_path: str | None = None,
) -> dict[str, Any]:
    certificates = load_collection(COLLECTION)
    if any(c["certificate_id"] == certificate_id for c in certificates):
        raise FileExistsError(f"Certificate '{certificate_id}' already exists")
    _check_references(participant_id, training_program_id)
    certificate = {
        "id": next_id(certificates),
        "certificate_id": certificate_id,
        "participant_id": participant_id,
        "training_program_id": training_program_id,
        "issue_date": issue_date,
        "expiry_date": expiry_date,
        "certificate_path": certificate_path,
    }
    certificates.append(certificate)
    save_collection(COLLECTION, certificates)
    return certificate


def update_certificate(certificate_pk: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    certificates = load_collection(COLLECTION)
    certificate = find_by_id(certificates, certificate_pk)
    if certificate is None:
        return None
    allowed = {
        "certificate_id", "participant_id", "training_program_id",
        "issue_date", "expiry_date", "certificate_path",
    }
    updates = {k: v for k, v in fields.items() if k in allowed}
    if not updates:
        raise ValueError("No valid fields to update")
    new_code = updates.get("certificate_id")
    if new_code and any(
        c["certificate_id"] == new_code and c["id"] != certificate_pk for c in certificates
    ):
        raise FileExistsError(f"Certificate '{new_code}' already exists")
    _check_references(
        updates.get("participant_id", certificate["participant_id"]),
        updates.get("training_program_id", certificate["training_program_id"]),
    )
    certificate.update(updates)
    save_collection(COLLECTION, certificates)
    return certificate


def delete_certificate(certificate_pk: int) -> bool:
    certificates = load_collection(COLLECTION)
    remaining = [c for c in certificates if c["id"] != certificate_pk]
    if len(remaining) == len(certificates):
        return False
    save_collection(COLLECTION, remaining)
    return True


def _parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def certificate_status(certificate: dict[str, Any], now: datetime | None = None) -> str:
    """"expired" once the expiry date has passed, "active" otherwise (including no expiry)."""
    expiry = certificate.get("expiry_date")
    if not expiry:
        return "active"
    try:
        expires_at = _parse_datetime(expiry)
    except (TypeError, ValueError):
        logger.warning(f"Certificate {certificate.get('certificate_id')!r} has unreadable expiry date {expiry!r}, treating as active")
        return "active"
    now = now or datetime.now(timezone.utc)
    return "expired" if now > expires_at else "active"


def verify_certificate(
    certificate_id: str, participant_name: str, now: datetime | None = None
) -> dict[str, Any] | None:
    """Match a certificate code against the holder's full name.

    Returns None unless both the code and the name agree.
    """
    certificate = None
    for c in load_collection(COLLECTION):
        if c["certificate_id"] == certificate_id.strip():
            certificate = c
            break
    if certificate is None:
        return None
    participant = get_participant(certificate["participant_id"])
    if participant is None or participant["full_name"].strip() != participant_name.strip():
        return None
    program = get_training_program(certificate["training_program_id"])
    return {
        "certificate": {
            "certificate_id": certificate["certificate_id"],
            "issue_date": certificate["issue_date"],
            "expiry_date": certificate["expiry_date"],
            "status": certificate_status(certificate, now),
            "certificate_path": certificate["certificate_path"],
        },
        "participant": {
            "id": participant["id"],
            "name": participant["full_name"],
        },
        "training": {
            "id": certificate["training_program_id"],
            "name": program["title"] if program else None,
            "slug": program["slug"] if program else None,
        },
    }


def check_participant_status(
    participant_id: str | None = None, email: str | None = None
) -> dict[str, Any] | None:
    """Summarize a participant and the programs they are enrolled in."""
    participant = find_participant(participant_id=participant_id, email=email)
    if participant is None:
        return None
    issued = [c for c in load_collection(COLLECTION) if c["participant_id"] == participant["id"]]
    program_ids = [participant["training_program_id"]]
    program_ids += [c["training_program_id"] for c in issued if c["training_program_id"] not in program_ids]

    enrolled = []
    for program_id in program_ids:
        program = get_training_program(program_id)
        certificate = next((c for c in issued if c["training_program_id"] == program_id), None)
        enrolled.append({
            "id": program_id,
            "name": program["title"] if program else None,
            "completion_date": certificate["issue_date"] if certificate else None,
            "certificate_id": certificate["certificate_id"] if certificate else None,
        })
    return {
        "participant": {
            "participant_id": participant["participant_id"],
            "name": participant["full_name"],
            "status": participant["status"],
        },
        "enrolled_programs": enrolled,
    }
