"""
Checklist Item Model
"""
from pydantic import Field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, FrozenSet
import re
import uuid

from ..errors import MalformedInputError
from .entry import EntryListItem
from .records import ChecklistItemRecord, parse_record

if TYPE_CHECKING:
    from ..services.csv_rows import RowReader, RowWriter

# "false", "0" и "" читаются как False, всё остальное как True
_FALSE_VALUES = re.compile(r"^(?:false|0|)$", re.IGNORECASE)


def new_uid() -> int:
    """Random 64 bit item id"""
    return uuid.uuid4().int >> 64


class ChecklistItem(EntryListItem):
    """Single checkable item in a checklist"""

    IS_DONE: ClassVar[str] = "done"
    FLAG_NAMES: ClassVar[FrozenSet[str]] = EntryListItem.FLAG_NAMES | {IS_DONE}

    uid: int = Field(default_factory=new_uid)

    @classmethod
    def copy_of(cls, other: "ChecklistItem") -> "ChecklistItem":
        """Clone text and done state under a new uid"""
        return cls(text=other.text, flags=set(other.flags))

    @property
    def done(self) -> bool:
        return self.get_flag(self.IS_DONE)

    def set_done(self, done: bool):
        if done:
            self.set_flag(self.IS_DONE)
        else:
            self.clear_flag(self.IS_DONE)

    @property
    def is_moveable(self) -> bool:
        return not self.done

    def same_as(self, other: "ChecklistItem") -> bool:
        """Same text and done state, uid is ignored"""
        return self.text == other.text and self.done == other.done

    def merge(self, other: "ChecklistItem") -> bool:
        """Take text and done state from another item. True if anything changed."""
        changed = False
        if self.text != other.text:
            self.text = other.text
            changed = True
        if self.done != other.done:
            self.set_done(other.done)
            changed = True
        return changed

    def load_json(self, data: Dict[str, Any]):
        record = parse_record(ChecklistItemRecord, data)
        self.uid = record.uid
        self.text = record.name or None
        self.set_done(record.done)

    def to_json(self) -> Dict[str, Any]:
        job: Dict[str, Any] = {"uid": self.uid, "name": self.text or ""}
        if self.done:
            job["done"] = True
        return job

    def load_csv(self, reader: "RowReader") -> bool:
        """
        Read one row: list name, item text, done status
        Returns:
            False if there was no row to read
        """
        row = reader.next()
        if row is None:
            return False
        if len(row) < 2:
            raise MalformedInputError(f"Checklist item row needs at least 2 columns, got {row!r}")
        self.text = row[1]
        done = row[2].strip() if len(row) > 2 else ""
        self.set_done(not _FALSE_VALUES.match(done))
        return True

    def to_csv(self, writer: "RowWriter", list_name: str):
        writer.write_row([list_name, self.text or "", "TRUE" if self.done else "FALSE"])

    def to_plain_string(self, tab: str = "") -> str:
        line = f"{tab}{self.text or ''}"
        if self.done:
            line += " *"
        return line
