"""
CSV Row Reader and Writer
"""
from typing import Iterable, Iterator, List, Optional, TextIO
import csv
import io

from ..config import get_settings


class RowReader:
    """
    Rows with one row of lookahead. peek() looks at the next row without
    consuming it, next() consumes it. Both return None at end of input.
    Blank rows are skipped.
    """

    def __init__(self, rows: Iterable[List[str]]):
        self._rows: Iterator[List[str]] = iter(rows)
        self._next: Optional[List[str]] = None
        self._exhausted = False
        self.consumed = 0

    @classmethod
    def from_stream(cls, stream: TextIO, delimiter: Optional[str] = None) -> "RowReader":
        delimiter = delimiter or get_settings().csv_delimiter
        return cls(csv.reader(stream, delimiter=delimiter))

    @classmethod
    def from_text(cls, text: str, delimiter: Optional[str] = None) -> "RowReader":
        return cls.from_stream(io.StringIO(text), delimiter)

    def peek(self) -> Optional[List[str]]:
        if self._next is None and not self._exhausted:
            for row in self._rows:
                if row:
                    self._next = row
                    break
            else:
                self._exhausted = True
        return self._next

    def next(self) -> Optional[List[str]]:
        row = self.peek()
        if row is not None:
            self._next = None
            self.consumed += 1
        return row


class RowWriter:
    """Thin wrapper over csv.writer"""

    def __init__(self, stream: TextIO, delimiter: Optional[str] = None):
        self._writer = csv.writer(stream, delimiter=delimiter or get_settings().csv_delimiter)

    def write_row(self, row: List[str]):
        self._writer.writerow(row)
