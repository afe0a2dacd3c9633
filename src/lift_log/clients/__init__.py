"""Interactive input clients."""

from .program_editor import ProgramEditorClient

__all__ = ["ProgramEditorClient"]
