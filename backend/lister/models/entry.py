"""
Entry List Models
Base types shared by lists and the entries they hold
"""
from pydantic import BaseModel, Field
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Set
import logging

from ..config import get_settings
from ..errors import MalformedInputError
from .undo import UndoLog

logger = logging.getLogger(__name__)


class EntryListItem(BaseModel):
    """Something that can be shown in a list: display text plus a set of flags"""

    FLAG_NAMES: ClassVar[FrozenSet[str]] = frozenset()

    text: Optional[str] = None
    flags: Set[str] = Field(default_factory=set)

    @property
    def flag_names(self) -> FrozenSet[str]:
        return self.FLAG_NAMES

    def _check_flag(self, name: str):
        if name not in self.FLAG_NAMES:
            raise ValueError(f"Unknown flag '{name}' for {type(self).__name__}")

    def get_flag(self, name: str) -> bool:
        return name in self.flags

    def set_flag(self, name: str):
        self._check_flag(name)
        self.flags.add(name)

    def clear_flag(self, name: str):
        self._check_flag(name)
        self.flags.discard(name)

    @property
    def is_moveable(self) -> bool:
        return False


class EntryList(EntryListItem):
    """
    A list of entries. Owns the ordered children and the flags common to
    every kind of list.
    """

    DISPLAY_SORTED: ClassVar[str] = "sort"
    WARN_ABOUT_DUPLICATES: ClassVar[str] = "warndup"
    FLAG_NAMES: ClassVar[FrozenSet[str]] = frozenset({DISPLAY_SORTED, WARN_ABOUT_DUPLICATES})

    items: List[EntryListItem] = Field(default_factory=list)

    @property
    def items_are_moveable(self) -> bool:
        return True

    def size(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def add(self, item: EntryListItem) -> int:
        """Add an item to the end of the list, returning its index"""
        self.items.append(item)
        return len(self.items) - 1

    def get(self, i: int) -> Optional[EntryListItem]:
        if i < 0 or i >= len(self.items):
            return None
        return self.items[i]

    def put(self, i: int, item: EntryListItem):
        """Insert an item at the given position"""
        self.items.insert(i, item)

    def clear(self):
        self.items.clear()

    def index_of(self, item: EntryListItem) -> int:
        """Index of this exact item object, or -1"""
        for i, candidate in enumerate(self.items):
            if candidate is item:
                return i
        return -1

    def remove(self, item: EntryListItem, undo_log: Optional[UndoLog] = None):
        """
        Remove an item from the list
        Args:
            item: the item to remove
            undo_log: when given, the removal is recorded so it can be undone
        """
        index = self.index_of(item)
        if index < 0:
            return
        logger.debug(f"Removing item {index} from '{self.text}'")
        if undo_log is not None:
            undo_log.record(index, item)
        del self.items[index]

    def find(self, text: str, match_case: bool) -> int:
        """
        Find an item by its text
        Args:
            text: text to look for
            match_case: only accept an exact match
        Returns:
            index of the matched item, or -1
        """
        if match_case:
            for i, item in enumerate(self.items):
                if item.text == text:
                    return i
            return -1

        wanted = text.lower()
        for i, item in enumerate(self.items):
            if (item.text or "").lower() == wanted:
                return i
        for i, item in enumerate(self.items):
            if wanted in (item.text or "").lower():
                return i
        return -1

    def would_duplicate(self, text: str) -> bool:
        """True if duplicate warnings are on and an item with this text exists"""
        return self.get_flag(self.WARN_ABOUT_DUPLICATES) and self.find(text, False) >= 0

    def move_item_to_position(self, item: EntryListItem, i: int) -> bool:
        """Move an item to a new position in the list"""
        if i < 0 or i >= len(self.items) or self.index_of(item) < 0:
            return False
        self.remove(item)
        self.put(i, item)
        return True

    def display_items(self) -> List[EntryListItem]:
        """Items in the order they are shown"""
        if self.get_flag(self.DISPLAY_SORTED):
            return sorted(self.items, key=lambda item: (item.text or "").lower())
        return list(self.items)

    def load_json(self, record: Dict[str, Any]):
        """Load the flags from a decoded JSON object"""
        for name in self.FLAG_NAMES:
            if name in record:
                value = record[name]
                if not isinstance(value, bool):
                    raise MalformedInputError(f"Flag '{name}' must be a boolean, got {value!r}")
            elif name == self.DISPLAY_SORTED:
                value = get_settings().force_alpha_sort
            else:
                value = False
            if value:
                self.flags.add(name)
            else:
                self.flags.discard(name)

    def to_json(self) -> Dict[str, Any]:
        """Flags as a JSON object, every recognized flag written explicitly"""
        return {name: name in self.flags for name in sorted(self.FLAG_NAMES)}
