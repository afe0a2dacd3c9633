"""Helpers shared by the API routers."""

from fastapi import Request
from fastapi.responses import JSONResponse

from ...models.workout import WorkoutEntry
from ...services.tracker import Tracker


def get_tracker(request: Request) -> Tracker:
    """Get the tracker from app state."""
    return request.app.state.tracker


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def entry_to_json(tracker: Tracker, entry: WorkoutEntry) -> dict:
    """Entry dict with the program title resolved for display."""
    data = entry.to_dict()
    data["programTitle"] = tracker.program_title(entry.program_id) or None
    return data
