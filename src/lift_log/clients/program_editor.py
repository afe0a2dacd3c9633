"""Interactive program editing via questionary prompts."""

import questionary
from questionary import Style

from ..errors import ValidationError
from ..models.program import Program
from ..services.program_store import ProgramEditSession
from ..services.tracker import Tracker

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def describe_session(session: ProgramEditSession) -> str:
    """Render the scratch copy being edited."""
    lines = [f"Title: {session.title}", "Exercises:"]
    if not session.exercises:
        lines.append("  (none)")
    for i, ex in enumerate(session.exercises, start=1):
        name = ex.name or "<unnamed>"
        line = f"  {i}. {name} - Reps: {ex.default_reps}, Weight: {ex.default_weight:g} kg"
        if ex.substitutes:
            line += f" (Substitutes: {', '.join(ex.substitutes)})"
        lines.append(line)
    return "\n".join(lines)


class ProgramEditorClient:
    """Walks the user through an open program edit session.

    Changes stay in the session until the user picks Save; Cancel (or
    Ctrl+C) throws them away.
    """

    async def run(self, tracker: Tracker) -> Program | None:
        """Edit the tracker's open session until saved or cancelled.

        Returns:
            The saved program, or None if editing was cancelled
        """
        session = tracker.programs.session
        if session is None:
            raise ValidationError("No program is being edited")

        while True:
            print("\n=== Edit Program ===\n")
            print(describe_session(session))
            print()

            choices = [
                questionary.Choice("Rename program", "rename"),
                questionary.Choice("Add exercise", "add"),
            ]
            if session.exercises:
                choices.append(questionary.Choice("Edit exercise", "edit"))
                choices.append(questionary.Choice("Remove exercise", "remove"))
            choices.append(questionary.Choice("Save", "save"))
            choices.append(questionary.Choice("Cancel", "cancel"))

            action = await questionary.select(
                "What would you like to do?",
                choices=choices,
                style=custom_style,
            ).ask_async()

            if action is None or action == "cancel":
                tracker.cancel_program_edit()
                return None

            if action == "rename":
                title = await questionary.text(
                    "Program title:",
                    default=session.title,
                    style=custom_style,
                ).ask_async()
                if title is not None:
                    session.title = title

            elif action == "add":
                session.add_exercise()
                await self._edit_exercise(session, len(session.exercises) - 1)

            elif action == "edit":
                index = await self._pick_exercise(session, "Which exercise?")
                if index is not None:
                    await self._edit_exercise(session, index)

            elif action == "remove":
                index = await self._pick_exercise(session, "Remove which exercise?")
                if index is not None:
                    session.remove_exercise(index)

            elif action == "save":
                try:
                    return await tracker.save_program_edit()
                except ValidationError as e:
                    print(f"\n[ERROR] {e}")

    async def _pick_exercise(self, session: ProgramEditSession, message: str) -> int | None:
        return await questionary.select(
            message,
            choices=[
                questionary.Choice(ex.name or f"<unnamed #{i + 1}>", i)
                for i, ex in enumerate(session.exercises)
            ],
            style=custom_style,
        ).ask_async()

    async def _edit_exercise(self, session: ProgramEditSession, index: int) -> None:
        template = session.exercises[index]

        name = await questionary.text(
            "Exercise name (blank names are dropped on save):",
            default=template.name,
            style=custom_style,
        ).ask_async()
        if name is None:
            return
        session.update_exercise(index, "name", name)

        substitutes = await questionary.text(
            "Substitutes (comma separated):",
            default=", ".join(template.substitutes),
            style=custom_style,
        ).ask_async()
        if substitutes is not None:
            session.update_exercise(index, "substitutes", substitutes)

        reps = await questionary.text(
            "Default reps:",
            default=str(template.default_reps),
            style=custom_style,
        ).ask_async()
        if reps is not None:
            session.update_exercise(index, "default_reps", reps)

        weight = await questionary.text(
            "Default weight (kg):",
            default=f"{template.default_weight:g}",
            style=custom_style,
        ).ask_async()
        if weight is not None:
            session.update_exercise(index, "default_weight", weight)
