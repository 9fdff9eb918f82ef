"""
Tests for the EntryList base and the undo log
"""
import pytest

from lister.models import Checklist, ChecklistItem, EntryList, EntryListItem, UndoLog


@pytest.fixture
def letters(make_item):
    entry_list = EntryList(text="Letters")
    for text in ("bravo", "Alpha", "charlie", "alphabet"):
        entry_list.add(make_item(text))
    return entry_list


class TestFlags:
    """Флаги базового списка"""

    def test_base_flag_names(self):
        assert EntryList.FLAG_NAMES == {"sort", "warndup"}
        assert EntryListItem.FLAG_NAMES == frozenset()

    def test_set_and_clear(self):
        entry_list = EntryList()
        entry_list.set_flag("sort")
        assert entry_list.get_flag("sort")
        entry_list.clear_flag("sort")
        assert not entry_list.get_flag("sort")

    def test_unknown_flag(self):
        with pytest.raises(ValueError):
            EntryList().set_flag("movend")
        with pytest.raises(ValueError):
            EntryList().clear_flag("autodel")

    def test_to_json_writes_every_flag(self):
        entry_list = EntryList()
        entry_list.set_flag("warndup")
        assert entry_list.to_json() == {"sort": False, "warndup": True}


class TestChildren:
    """Операции с элементами списка"""

    def test_add_get_put(self, letters, make_item):
        assert letters.size() == 4
        assert letters.get(0).text == "bravo"
        assert letters.get(4) is None
        assert letters.get(-1) is None
        letters.put(1, make_item("delta"))
        assert [i.text for i in letters.items] == ["bravo", "delta", "Alpha", "charlie", "alphabet"]

    def test_find(self, letters):
        assert letters.find("alpha", True) == -1
        assert letters.find("Alpha", True) == 1
        assert letters.find("ALPHA", False) == 1
        assert letters.find("habe", False) == 3
        assert letters.find("zulu", False) == -1

    def test_would_duplicate(self, letters):
        assert letters.would_duplicate("bravo") is False
        letters.set_flag(EntryList.WARN_ABOUT_DUPLICATES)
        assert letters.would_duplicate("BRAVO") is True
        assert letters.would_duplicate("zulu") is False

    def test_move_item_to_position(self, letters):
        charlie = letters.get(2)
        assert letters.move_item_to_position(charlie, 0) is True
        assert [i.text for i in letters.items] == ["charlie", "bravo", "Alpha", "alphabet"]
        assert letters.move_item_to_position(charlie, 9) is False

    def test_index_of_uses_identity(self, letters):
        lookalike = ChecklistItem(text="bravo", uid=letters.get(0).uid)
        assert letters.index_of(lookalike) == -1
        assert letters.index_of(letters.get(0)) == 0

    def test_remove_missing_item_is_noop(self, letters):
        letters.remove(ChecklistItem(text="zulu"))
        assert letters.size() == 4

    def test_display_sorted(self, letters):
        assert [i.text for i in letters.display_items()] == ["bravo", "Alpha", "charlie", "alphabet"]
        letters.set_flag("sort")
        assert [i.text for i in letters.display_items()] == ["Alpha", "alphabet", "bravo", "charlie"]
        # Исходный порядок не меняется
        assert letters.get(0).text == "bravo"


class TestUndoLog:
    """Журнал отмены"""

    def test_undo_empty_log(self, letters):
        assert UndoLog().undo(letters) == 0

    def test_record_opens_set(self, letters):
        undo_log = UndoLog()
        letters.remove(letters.get(0), undo_log)
        assert undo_log.depth == 1
        assert undo_log.current.removals[0].index == 0

    def test_undo_restores_positions(self, letters):
        undo_log = UndoLog()
        undo_log.new_set()
        letters.remove(letters.get(0), undo_log)
        letters.remove(letters.get(0), undo_log)
        letters.remove(letters.get(1), undo_log)
        assert [i.text for i in letters.items] == ["charlie"]

        assert undo_log.undo(letters) == 3
        assert [i.text for i in letters.items] == ["bravo", "Alpha", "charlie", "alphabet"]
        assert undo_log.depth == 0

    def test_sets_undo_separately(self, make_item):
        checklist = Checklist(text="Sets")
        for text in ("a", "b", "c"):
            checklist.add(make_item(text, done=True))
        undo_log = UndoLog()
        undo_log.new_set()
        checklist.remove(checklist.get(0), undo_log)
        checklist.delete_all_checked(undo_log)
        assert undo_log.depth == 2

        assert undo_log.undo(checklist) == 2
        assert [i.text for i in checklist.items] == ["b", "c"]
        assert undo_log.undo(checklist) == 1
        assert [i.text for i in checklist.items] == ["a", "b", "c"]
