"""Program management routes."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...errors import NotFoundError, ValidationError
from .common import entry_to_json, error_response, get_tracker

router = APIRouter(prefix="/programs", tags=["programs"])


class ExerciseIn(BaseModel):
    name: str = ""
    substitutes: list[str] | str = []
    defaultReps: float | str = 10
    defaultWeight: float | str = 0


class ProgramIn(BaseModel):
    title: str
    exercises: list[ExerciseIn] = []


@router.get("")
async def list_programs(request: Request):
    """List all programs."""
    tracker = get_tracker(request)
    return [program.to_dict() for program in tracker.programs]


@router.post("", status_code=201)
async def create_program(request: Request):
    """Add an empty program; edit it with PUT /programs/{id}."""
    tracker = get_tracker(request)
    session = await tracker.create_program()
    tracker.cancel_program_edit()
    return tracker.programs.require(session.program_id).to_dict()


@router.get("/{program_id}")
async def get_program(request: Request, program_id: str):
    tracker = get_tracker(request)
    program = tracker.programs.get(program_id)
    if program is None:
        return error_response(404, f"Program {program_id} not found")
    return program.to_dict()


@router.put("/{program_id}")
async def update_program(request: Request, program_id: str, body: ProgramIn):
    """Replace a program's title and exercises.

    Runs a full edit session: blank exercise names are dropped and a blank
    title is rejected without touching the stored program.
    """
    tracker = get_tracker(request)
    try:
        session = tracker.start_program_edit(program_id)
    except NotFoundError as e:
        return error_response(404, str(e))

    session.title = body.title
    session.exercises = []
    for ex in body.exercises:
        session.add_exercise()
        index = len(session.exercises) - 1
        session.update_exercise(index, "name", ex.name)
        session.update_exercise(index, "substitutes", ex.substitutes)
        session.update_exercise(index, "default_reps", ex.defaultReps)
        session.update_exercise(index, "default_weight", ex.defaultWeight)

    try:
        program = await tracker.save_program_edit()
    except ValidationError as e:
        tracker.cancel_program_edit()
        return error_response(400, str(e))
    return program.to_dict()


@router.delete("/{program_id}")
async def delete_program(request: Request, program_id: str):
    """Delete a program. The client confirms with the user before calling."""
    tracker = get_tracker(request)
    try:
        await tracker.delete_program(program_id, confirm=lambda message: True)
    except NotFoundError as e:
        return error_response(404, str(e))
    return {"status": "deleted", "id": program_id, "programFilter": tracker.criteria.program}


@router.post("/{program_id}/apply")
async def apply_program(request: Request, program_id: str):
    """Log the program's exercises for today."""
    tracker = get_tracker(request)
    try:
        entries = await tracker.apply_program(program_id)
    except NotFoundError as e:
        return error_response(404, str(e))
    return [entry_to_json(tracker, entry) for entry in entries]


@router.get("/{program_id}/history")
async def program_history(request: Request, program_id: str):
    """Filter history to this program and return it."""
    tracker = get_tracker(request)
    entries = tracker.show_program_history(program_id)
    return [entry_to_json(tracker, entry) for entry in entries]
