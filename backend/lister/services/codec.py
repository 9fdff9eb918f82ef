"""
Checklist Codec
Conversion between checklists and JSON, CSV and plain text
"""
from typing import Iterable, List, Optional, TextIO, Union
import io
import json
import logging

from ..config import get_settings
from ..errors import MalformedInputError
from ..models import Checklist
from .csv_rows import RowReader, RowWriter

logger = logging.getLogger(__name__)


def load_checklist(text: str) -> Checklist:
    """Parse JSON text into a checklist"""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}") from e
    if not isinstance(record, dict):
        raise MalformedInputError(f"Expected a JSON object, got {type(record).__name__}")
    return Checklist.from_json(record)


def dump_checklist(checklist: Checklist, indent: Optional[int] = None) -> str:
    """Serialize a checklist to JSON text"""
    if indent is None:
        indent = get_settings().json_indent
    return json.dumps(checklist.to_json(), indent=indent, ensure_ascii=False)


def read_checklists_csv(source: Union[str, TextIO]) -> List[Checklist]:
    """
    Import every checklist from legacy CSV rows
    Args:
        source: CSV text or an open text stream
    Returns:
        one checklist per contiguous run of rows with the same list name
    """
    reader = RowReader.from_text(source) if isinstance(source, str) else RowReader.from_stream(source)
    checklists = []
    while True:
        before = reader.consumed
        checklist = Checklist()
        if not checklist.load_csv(reader) or reader.consumed == before:
            break
        checklists.append(checklist)
    logger.info(f"Imported {len(checklists)} checklist(s) from CSV ({reader.consumed} rows)")
    return checklists


def write_checklists_csv(checklists: Iterable[Checklist], stream: Optional[TextIO] = None) -> str:
    """
    Write checklists as CSV rows
    Returns:
        the CSV text when no stream was given, otherwise ""
    """
    target = stream if stream is not None else io.StringIO()
    writer = RowWriter(target)
    for checklist in checklists:
        checklist.to_csv(writer)
    return target.getvalue() if stream is None else ""


def checklist_to_text(checklist: Checklist) -> str:
    """Plain text rendering, checked items are marked with *"""
    return checklist.to_plain_string()
