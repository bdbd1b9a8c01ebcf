"""chrklst - present a checklist one line at a time."""

__version__ = "0.1.0"

from .models import AppInfo, ChecklistError, DONE_TEXT
from .storage import checklist_dir, get_checklist, get_checklists
from .core import AppState, Message, StepStack

__all__ = [
    "AppInfo",
    "ChecklistError",
    "DONE_TEXT",
    "checklist_dir",
    "get_checklist",
    "get_checklists",
    "AppState",
    "Message",
    "StepStack",
]
