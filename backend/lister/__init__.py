"""
Lister - checklist data model with JSON and CSV conversion
"""
from .config import Settings, get_settings, configure_logging
from .errors import MalformedInputError
from .models import Checklist, ChecklistItem, EntryList, EntryListItem, UndoLog

__all__ = [
    "Settings", "get_settings", "configure_logging",
    "MalformedInputError",
    "Checklist", "ChecklistItem", "EntryList", "EntryListItem", "UndoLog",
]

__version__ = "1.0.0"
