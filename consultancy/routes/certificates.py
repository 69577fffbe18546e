"""Certificate CRUD, public verification, and participant status endpoints."""

from fastapi import APIRouter, HTTPException

from consultancy import storage

from .models import CheckStatusBody, CreateCertificate, UpdateCertificate, VerifyCertificateBody

router = APIRouter()


@router.post("/verify-certificate")
async def verify_certificate(body: VerifyCertificateBody):
    """Verify a certificate code against the holder's name."""
    result = storage.verify_certificate(body.certificate_id, body.participant_name)
    if not result:
        raise HTTPException(404, "Certificate not found or details do not match")
    return result


@router.post("/check-status")
async def check_status(body: CheckStatusBody):
    """Look up a participant by participant code or email."""
    if not body.participant_id and not body.email:
        raise HTTPException(400, "Participant ID or email is required")
    result = storage.check_participant_status(body.participant_id, body.email)
    if not result:
        raise HTTPException(404, "Participant not found")
    return result


@router.get("/certificates")
async def list_certificates():
    """List all certificates."""
    return storage.list_certificates()


@router.post("/certificates", status_code=201)
async def create_certificate(body: CreateCertificate):
    """Issue a certificate."""
    try:
        return storage.create_certificate(**body.model_dump())
    except FileExistsError as e:
        raise HTTPException(409, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.get("/certificates/{certificate_pk}")
async def get_certificate(certificate_pk: int):
    """Get a single certificate."""
    certificate = storage.get_certificate(certificate_pk)
    if not certificate:
        raise HTTPException(404, "Certificate not found")
    return certificate


@router.patch("/certificates/{certificate_pk}")
async def update_certificate(certificate_pk: int, body: UpdateCertificate):
    """Update certificate fields."""
    try:
        updated = storage.update_certificate(certificate_pk, body.model_dump(exclude_none=True))
    except FileExistsError as e:
        raise HTTPException(409, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Certificate not found")
    return updated


@router.delete("/certificates/{certificate_pk}")
async def delete_certificate(certificate_pk: int):
    """Delete a certificate."""
    if not storage.delete_certificate(certificate_pk):
        raise HTTPException(404, "Certificate not found")
    return {"ok": True}
