"""Training program CRUD endpoints. Programs are addressable by id or slug."""

from fastapi import APIRouter, HTTPException

from consultancy import storage

from .models import CreateTrainingProgram, UpdateTrainingProgram

router = APIRouter()


@router.get("/training-programs")
async def list_training_programs():
    """List all training programs."""
    return storage.list_training_programs()


@router.post("/training-programs", status_code=201)
async def create_training_program(body: CreateTrainingProgram):
    """Create a program. The slug is generated from the title unless given."""
    fields = body.model_dump(exclude={"title", "description", "category", "duration"})
    try:
        return storage.create_training_program(
            body.title, body.description, body.category, body.duration, **fields
        )
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.get("/training-programs/{identifier}")
async def get_training_program(identifier: str):
    """Get a single program by numeric id or slug."""
    program = storage.get_training_program(identifier)
    if not program:
        raise HTTPException(404, "Training program not found")
    return program


@router.patch("/training-programs/{program_id}")
async def update_training_program(program_id: int, body: UpdateTrainingProgram):
    """Update program fields. Send an empty slug to regenerate it from the title."""
    try:
        updated = storage.update_training_program(program_id, body.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not updated:
        raise HTTPException(404, "Training program not found")
    return updated


@router.delete("/training-programs/{program_id}")
async def delete_training_program(program_id: int):
    """Delete a program that has no enrolled participants."""
    try:
        deleted = storage.delete_training_program(program_id)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not deleted:
        raise HTTPException(404, "Training program not found")
    return {"ok": True}
