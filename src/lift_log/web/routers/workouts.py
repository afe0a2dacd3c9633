"""Workout log and history routes."""

from datetime import date, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ...errors import NotFoundError, ValidationError
from ...models.catalog import ALL
from ...services.filters import FilterCriteria
from .common import entry_to_json, error_response, get_tracker

router = APIRouter(prefix="/workouts", tags=["workouts"])
history_router = APIRouter(prefix="/history", tags=["history"])


class WorkoutIn(BaseModel):
    category: str = ""
    exercise: str = ""
    reps: float | None = None
    weight: float | None = None
    programId: str | None = None


class WorkoutUpdate(BaseModel):
    category: str | None = None
    exercise: str | None = None
    reps: float | None = None
    weight: float | None = None
    date: datetime | None = None
    programId: str | None = None
    clearProgram: bool = False


class FiltersIn(BaseModel):
    category: str | None = None
    timeframe: str | None = None
    start: date | None = None
    end: date | None = None
    program: str | None = None


def criteria_to_json(criteria: FilterCriteria) -> dict:
    def bound(value):
        return value.isoformat() if value is not None else None

    return {
        "category": criteria.category,
        "timeframe": criteria.timeframe,
        "start": bound(criteria.custom_range.start),
        "end": bound(criteria.custom_range.end),
        "program": criteria.program,
    }


@router.get("")
async def list_workouts(request: Request):
    """All logged workouts, unfiltered, in logged order."""
    tracker = get_tracker(request)
    return [entry_to_json(tracker, entry) for entry in tracker.workouts]


@router.post("", status_code=201)
async def log_workout(request: Request, body: WorkoutIn):
    """Log a workout."""
    tracker = get_tracker(request)
    try:
        entry = await tracker.log_workout(
            body.category,
            body.exercise,
            body.reps,
            body.weight,
            program_id=body.programId,
        )
    except ValidationError as e:
        return error_response(400, str(e))
    return entry_to_json(tracker, entry)


@router.put("/{entry_id}")
async def edit_workout(request: Request, entry_id: str, body: WorkoutUpdate):
    """Replace fields of a logged workout."""
    tracker = get_tracker(request)
    try:
        entry = await tracker.edit_workout(
            entry_id,
            category=body.category,
            exercise=body.exercise,
            reps=body.reps,
            weight=body.weight,
            program_id=body.programId,
            clear_program=body.clearProgram,
            when=body.date,
        )
    except NotFoundError as e:
        return error_response(404, str(e))
    except ValidationError as e:
        return error_response(400, str(e))
    return entry_to_json(tracker, entry)


@router.delete("/{entry_id}")
async def delete_workout(request: Request, entry_id: str):
    """Delete a workout. The client confirms with the user before calling."""
    tracker = get_tracker(request)
    try:
        await tracker.delete_workout(entry_id, confirm=lambda message: True)
    except NotFoundError as e:
        return error_response(404, str(e))
    return {"status": "deleted", "id": entry_id}


@history_router.get("")
async def history(request: Request, match: str = ALL):
    """Workouts matching the current filters.

    ``match`` narrows further to a category or a program id.
    """
    tracker = get_tracker(request)
    return {
        "filters": criteria_to_json(tracker.criteria),
        "workouts": [entry_to_json(tracker, entry) for entry in tracker.history(match=match)],
    }


@history_router.get("/filters")
async def get_filters(request: Request):
    return criteria_to_json(get_tracker(request).criteria)


@history_router.put("/filters")
async def set_filters(request: Request, body: FiltersIn):
    """Change history filters; omitted fields stay as they are."""
    tracker = get_tracker(request)
    try:
        criteria = tracker.set_filters(
            category=body.category,
            timeframe=body.timeframe,
            start=body.start,
            end=body.end,
            program=body.program,
        )
    except ValidationError as e:
        return error_response(400, str(e))
    return criteria_to_json(criteria)


@history_router.delete("/filters/program")
async def clear_program_filter(request: Request):
    """Stop filtering history by program."""
    tracker = get_tracker(request)
    tracker.clear_program_filter()
    return {"program": ALL}
