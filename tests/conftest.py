"""
Общие фикстуры для тестов
"""
import pytest

from lister.config import get_settings
from lister.models import Checklist, ChecklistItem


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Настройки читаются заново в каждом тесте"""
    for name in ("FORCE_ALPHA_SORT", "JSON_INDENT", "CSV_DELIMITER", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_item():
    """Фабрика элементов чеклиста"""
    def _make(text, done=False):
        item = ChecklistItem(text=text)
        item.set_done(done)
        return item
    return _make


@pytest.fixture
def groceries(make_item):
    """Чеклист: Milk (x), Bread, Eggs (x), Apples"""
    checklist = Checklist(text="Groceries")
    checklist.add(make_item("Milk", done=True))
    checklist.add(make_item("Bread"))
    checklist.add(make_item("Eggs", done=True))
    checklist.add(make_item("Apples"))
    return checklist
