"""In-memory program collection with scratch edit sessions."""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..errors import NotFoundError, ValidationError
from ..models.program import ExerciseTemplate, Program

EDITABLE_FIELDS = ("name", "substitutes", "default_reps", "default_weight")


def split_substitutes(value: str | Iterable[str]) -> list[str]:
    """Parse a comma separated substitute list, dropping blanks."""
    parts = value.split(",") if isinstance(value, str) else value
    return [s.strip() for s in parts if s and s.strip()]


def _to_number(value) -> float:
    """Coerce form input to a number; unparseable input becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


@dataclass
class ProgramEditSession:
    """Uncommitted working copy of a program.

    Holds its own copies of the title and exercise templates, so nothing
    done here is visible on the canonical program until it is committed.
    """

    program_id: str
    title: str
    exercises: list[ExerciseTemplate] = field(default_factory=list)

    def add_exercise(self) -> ExerciseTemplate:
        """Append a blank exercise template."""
        template = ExerciseTemplate(name="", substitutes=[], default_reps=10, default_weight=0)
        self.exercises.append(template)
        return template

    def update_exercise(self, index: int, field_name: str, value) -> ExerciseTemplate:
        """Set one field of one exercise template.

        ``substitutes`` accepts comma separated text; the reps and weight
        fields accept anything numeric and fall back to 0.
        """
        template = self.exercises[index]
        if field_name == "substitutes":
            template.substitutes = split_substitutes(value)
        elif field_name == "default_reps":
            template.default_reps = int(_to_number(value))
        elif field_name == "default_weight":
            template.default_weight = _to_number(value)
        elif field_name == "name":
            template.name = value
        else:
            raise ValidationError(
                f"Unknown exercise field '{field_name}'. "
                f"Expected one of: {', '.join(EDITABLE_FIELDS)}"
            )
        return template

    def remove_exercise(self, index: int) -> ExerciseTemplate:
        """Remove an exercise template by position."""
        return self.exercises.pop(index)


class ProgramStore:
    """Ordered collection of programs."""

    def __init__(self, programs: Iterable[Program] | None = None):
        self._programs: list[Program] = list(programs or [])
        self.session: ProgramEditSession | None = None

    @property
    def programs(self) -> list[Program]:
        return list(self._programs)

    def __len__(self) -> int:
        return len(self._programs)

    def __iter__(self) -> Iterator[Program]:
        return iter(list(self._programs))

    def get(self, program_id: str) -> Program | None:
        """Get a program by id."""
        for program in self._programs:
            if program.id == program_id:
                return program
        return None

    def require(self, program_id: str) -> Program:
        """Get a program by id.

        Raises:
            NotFoundError: If no program has that id
        """
        program = self.get(program_id)
        if program is None:
            raise NotFoundError(f"Program {program_id} not found")
        return program

    def add(self, program: Program) -> None:
        """Append a new program."""
        if self.get(program.id) is not None:
            raise ValidationError(f"Program id '{program.id}' already exists")
        self._programs.append(program)

    def remove(self, program_id: str) -> bool:
        """Delete a program. Returns False if it did not exist."""
        program = self.get(program_id)
        if program is None:
            return False
        self._programs.remove(program)
        if self.session is not None and self.session.program_id == program_id:
            self.session = None
        return True

    def start_edit(self, program: Program) -> ProgramEditSession:
        """Open an edit session on a copy of the program.

        Any session already open is discarded.
        """
        self.session = ProgramEditSession(
            program_id=program.id,
            title=program.title,
            exercises=[ex.copy() for ex in program.exercises],
        )
        return self.session

    def commit_edit(self, session: ProgramEditSession | None = None) -> Program:
        """Write the session back to its program and close it.

        Templates with a blank name are dropped.

        Raises:
            ValidationError: If the title is blank (the session stays open)
            NotFoundError: If the program was deleted meanwhile
        """
        session = session or self.session
        if session is None:
            raise ValidationError("No program is being edited")
        if not session.title.strip():
            raise ValidationError("Program title cannot be empty")

        program = self.require(session.program_id)
        program.title = session.title.strip()
        program.exercises = [
            ex.copy() for ex in session.exercises if ex.name.strip()
        ]
        if self.session is session:
            self.session = None
        return program

    def cancel_edit(self) -> None:
        """Discard the open session."""
        self.session = None
