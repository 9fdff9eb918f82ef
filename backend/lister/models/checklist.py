"""
Checklist Models
"""
from pydantic import Field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, FrozenSet, List, Optional
import logging

from .checklist_item import ChecklistItem
from .entry import EntryList
from .records import ChecklistRecord, parse_record
from .undo import UndoLog

if TYPE_CHECKING:
    from ..services.csv_rows import RowReader, RowWriter

logger = logging.getLogger(__name__)


def _list_name(row: List[str]) -> Optional[str]:
    """First column of a CSV row"""
    return row[0] if row else None


class Checklist(EntryList):
    """A checklist of checkable items. Can itself be moved within a list of checklists."""

    MOVE_CHECKED_ITEMS_TO_END: ClassVar[str] = "movend"
    AUTO_DELETE_CHECKED: ClassVar[str] = "autodel"
    FLAG_NAMES: ClassVar[FrozenSet[str]] = EntryList.FLAG_NAMES | {
        MOVE_CHECKED_ITEMS_TO_END, AUTO_DELETE_CHECKED
    }

    items: List[ChecklistItem] = Field(default_factory=list)

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> "Checklist":
        """Build a checklist from a decoded JSON object. Raises MalformedInputError."""
        checklist = cls()
        checklist.load_json(record)
        return checklist

    @classmethod
    def copy_of(cls, other: "Checklist") -> "Checklist":
        """Deep copy: every item is cloned"""
        return cls(
            text=other.text,
            flags=set(other.flags),
            items=[ChecklistItem.copy_of(item) for item in other.items]
        )

    @property
    def is_moveable(self) -> bool:
        return True

    @property
    def items_are_moveable(self) -> bool:
        # Ручной порядок конфликтует с автоматическим перемещением отмеченных
        return not self.get_flag(self.MOVE_CHECKED_ITEMS_TO_END)

    def load_json(self, record: Dict[str, Any]):
        """
        Replace the content of this checklist with a decoded JSON object
        Args:
            record: object with "name", "items" and the flag fields
        Raises:
            MalformedInputError: a required field is missing or has the wrong type.
            The checklist is left partly loaded and should be discarded.
        """
        self.clear()
        super().load_json(record)
        parsed = parse_record(ChecklistRecord, record)
        self.text = parsed.name or None
        for item_record in parsed.items:
            item = ChecklistItem()
            item.load_json(item_record)
            self.add(item)

    def to_json(self) -> Dict[str, Any]:
        job = super().to_json()
        job["name"] = self.text or ""
        items = []
        job["items"] = items
        try:
            for item in self.items:
                items.append(item.to_json())
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize checklist '{self.text}': {e}")
        return job

    def load_csv(self, reader: "RowReader") -> bool:
        """
        Load the contiguous rows whose first column is this checklist's name.
        An unnamed checklist takes the name of the first row.
        Returns:
            False if there were no rows at all
        """
        row = reader.peek()
        if row is None:
            return False
        if not self.text:
            self.text = _list_name(row)
        while True:
            row = reader.peek()
            if row is None or _list_name(row) != self.text:
                break
            item = ChecklistItem()
            if not item.load_csv(reader):
                break
            self.add(item)
        return True

    def to_csv(self, writer: "RowWriter"):
        for item in self.items:
            item.to_csv(writer, self.text or "")

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.done)

    def check_all(self, check: bool) -> bool:
        """
        Set the done state of every item
        Returns:
            True if any item changed
        """
        changed = False
        for item in self.items:
            if item.done != check:
                item.set_done(check)
                changed = True
        return changed

    def delete_all_checked(self, undo_log: Optional[UndoLog] = None) -> int:
        """
        Delete all the checked items
        Args:
            undo_log: when given, the deletions are recorded there as one undo set
        Returns:
            number of items deleted
        """
        kill = [item for item in self.items if item.done]
        if not kill:
            return 0
        if undo_log is not None:
            undo_log.new_set()
        for dead in kill:
            self.remove(dead, undo_log)
        logger.debug(f"Deleted {len(kill)} checked item(s) from '{self.text}'")
        return len(kill)

    def set_item_done(self, item: ChecklistItem, done: bool, undo_log: Optional[UndoLog] = None) -> bool:
        """
        Check or uncheck an item, deleting it when auto delete is on
        Returns:
            True if the item was deleted
        """
        item.set_done(done)
        if not (done and self.get_flag(self.AUTO_DELETE_CHECKED)):
            return False
        if self.index_of(item) < 0:
            return False
        if undo_log is not None:
            undo_log.new_set()
        self.remove(item, undo_log)
        return True

    def display_items(self) -> List[ChecklistItem]:
        ordered = super().display_items()
        if self.get_flag(self.MOVE_CHECKED_ITEMS_TO_END):
            ordered = [i for i in ordered if not i.done] + [i for i in ordered if i.done]
        return ordered

    def to_plain_string(self, tab: str = "") -> str:
        lines = [f"{tab}{self.text or ''}"]
        lines.extend(item.to_plain_string(tab + "\t") for item in self.items)
        return "\n".join(lines)
