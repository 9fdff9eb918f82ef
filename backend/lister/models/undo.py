"""
Undo Models
Explicit record of removals, grouped into sets that are undone together
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
import logging

logger = logging.getLogger(__name__)


class Removal(BaseModel):
    """One removed entry and the index it was removed from"""
    index: int
    item: Any


class UndoSet(BaseModel):
    """Removals that are undone as one batch"""
    removals: List[Removal] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.removals)


class UndoLog:
    """Stack of undo sets owned by the caller of a removal"""

    def __init__(self):
        self._sets: List[UndoSet] = []

    @property
    def depth(self) -> int:
        return len(self._sets)

    @property
    def current(self) -> Optional[UndoSet]:
        return self._sets[-1] if self._sets else None

    def new_set(self) -> UndoSet:
        """Start a new undo set. Later removals are recorded in it."""
        undo_set = UndoSet()
        self._sets.append(undo_set)
        return undo_set

    def record(self, index: int, item: Any):
        """Record a removal in the current set, opening one if needed"""
        if not self._sets:
            self.new_set()
        self._sets[-1].removals.append(Removal(index=index, item=item))

    def undo(self, entry_list) -> int:
        """
        Undo the most recent undo set
        Args:
            entry_list: list the items were removed from
        Returns:
            number of items restored
        """
        if not self._sets:
            return 0
        undo_set = self._sets.pop()
        # Последнее удаление восстанавливается первым, чтобы индексы совпадали
        for removal in reversed(undo_set.removals):
            entry_list.put(removal.index, removal.item)
        logger.debug(f"Restored {len(undo_set)} item(s)")
        return len(undo_set)
