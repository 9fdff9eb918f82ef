# Pydantic Models
from .undo import Removal, UndoSet, UndoLog
from .records import ChecklistItemRecord, ChecklistRecord, parse_record
from .entry import EntryListItem, EntryList
from .checklist_item import ChecklistItem, new_uid
from .checklist import Checklist

__all__ = [
    # Undo
    "Removal", "UndoSet", "UndoLog",
    # Records
    "ChecklistItemRecord", "ChecklistRecord", "parse_record",
    # Entry lists
    "EntryListItem", "EntryList",
    # Checklist
    "ChecklistItem", "new_uid", "Checklist",
]
