# ==================================================
# fortune_store/models.py
# ==================================================
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .const import PADDING
from .errors import DecodeError, InternalInconsistency, OutOfRange
from .index import IndexHeader


@dataclass(frozen=True)
class Fortune:
    """One fortune cookie; ``number`` is 1‑based."""
    category: str
    number: int
    lines: tuple[str, ...]


@dataclass(frozen=True)
class FortuneCategory:
    category: str
    total_records: int


@dataclass(frozen=True, eq=False)
class CategoryRecord:
    """Decoded index plus the whole data file of one category."""
    category: str
    header: IndexHeader
    offsets: np.ndarray
    data: bytes

    @property
    def total_records(self) -> int:
        return self.header.record_count

    def summary(self) -> FortuneCategory:
        return FortuneCategory(self.category, self.total_records)

    def span(self, index: int) -> tuple[int, int]:
        """Byte range [start, end) of record ``index``, separator stripped."""
        start = int(self.offsets[index])
        end = int(self.offsets[index + 1])
        length = end - start - PADDING
        if length < 0:
            raise InternalInconsistency(
                f"Category {self.category} record {index + 1}: offsets "
                f"{start}..{end} leave {length} byte(s)")
        if start + length > len(self.data):
            raise OutOfRange(
                f"Category {self.category} record {index + 1}: bytes "
                f"{start}..{start + length} beyond data of {len(self.data)} byte(s)")
        return start, start + length

    def extract(self, index: int) -> Fortune:
        start, end = self.span(index)
        try:
            text = self.data[start:end].decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Category {self.category} record {index + 1} is not valid UTF-8") from e
        return Fortune(self.category, index + 1, tuple(text.split("\n")))
