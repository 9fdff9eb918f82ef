# Conversion Services
from .csv_rows import RowReader, RowWriter
from .codec import (
    load_checklist,
    dump_checklist,
    read_checklists_csv,
    write_checklists_csv,
    checklist_to_text,
)

__all__ = [
    # CSV rows
    "RowReader",
    "RowWriter",
    # Codec
    "load_checklist",
    "dump_checklist",
    "read_checklists_csv",
    "write_checklists_csv",
    "checklist_to_text",
]
