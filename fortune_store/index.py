# ==================================================
# fortune_store/index.py
# ==================================================
"""Reader/writer for the strfile style ``<category>.dat`` index.

Layout (big‑endian):
    version  u32
    count    u32        number of records in the data file
    longest  u32        longest record (bytes, separator excluded)
    shortest u32
    flags    u32
    delim    u8  + 3 pad
    offsets  u32 * (count + 1)   record starts, last one = end of data
"""
from __future__ import annotations

import struct
from typing import Iterable, NamedTuple

import numpy as np

from .const import (HEADER_FMT, HEADER_SIZE, OFFSET_SIZE, OFFSET_DTYPE,
                    INDEX_VERSION, PADDING, DEFAULT_DELIMITER)
from .errors import MalformedIndex


class IndexHeader(NamedTuple):
    version: int
    record_count: int
    longest_record_len: int
    shortest_record_len: int
    flags: int
    delimiter: int

    @property
    def delimiter_byte(self) -> bytes:
        return bytes([self.delimiter])


# ── decode ───────────────────────────────────────────────────────
def decode_index(raw: bytes) -> tuple[IndexHeader, np.ndarray]:
    """Return the header and a read‑only offset table of count+1 entries."""
    if len(raw) < HEADER_SIZE:
        raise MalformedIndex(
            f"Index holds {len(raw)} byte(s), header needs {HEADER_SIZE}")
    header = IndexHeader._make(struct.unpack_from(HEADER_FMT, raw, 0))

    n_offsets = header.record_count + 1
    need = HEADER_SIZE + OFFSET_SIZE * n_offsets
    if len(raw) < need:
        raise MalformedIndex(
            f"Index declares {header.record_count} record(s) "
            f"and needs {need} byte(s), found {len(raw)}")

    offsets = np.frombuffer(bytes(raw), dtype=OFFSET_DTYPE,
                            count=n_offsets, offset=HEADER_SIZE)
    return header, offsets


def offsets_monotonic(offsets) -> bool:
    if len(offsets) < 2:
        return True
    # widen first, uint32 differences wrap around
    return bool(np.all(np.diff(np.asarray(offsets, dtype=np.int64)) >= 0))


# ── encode ───────────────────────────────────────────────────────
def encode_index(header: IndexHeader, offsets: Iterable[int]) -> bytes:
    offsets = [int(o) for o in offsets]
    if len(offsets) != header.record_count + 1:
        raise ValueError(
            f"Expected {header.record_count + 1} offsets, got {len(offsets)}")
    return (struct.pack(HEADER_FMT, *header)
            + struct.pack(">%dI" % len(offsets), *offsets))


def build_index(data: bytes, delimiter: bytes = DEFAULT_DELIMITER,
                flags: int = 0) -> bytes:
    """
    Scan a data file and produce its index bytes.
    • a record ends at a line holding only the delimiter;
    • the data must end with such a line (extraction strips b"\\n%\\n"
      from every record, the last one included);
    • empty records (two delimiter lines in a row) cannot be expressed
      by contiguous offsets and are rejected.
    """
    if len(delimiter) != 1:
        raise ValueError("Delimiter must be a single byte")
    delim_line = delimiter + b"\n"

    offsets = [0]
    lengths = []
    start = pos = 0
    size = len(data)
    while pos < size:
        nl = data.find(b"\n", pos)
        end = size if nl < 0 else nl + 1
        if data[pos:end] == delim_line:
            if pos == start:
                raise ValueError(f"Empty record at byte offset {pos}")
            offsets.append(end)
            lengths.append(end - start - PADDING)
            start = end
        pos = end
    if start != size:
        raise ValueError(
            f"Trailing text after the last {delimiter!r} line at byte offset {start}")

    header = IndexHeader(INDEX_VERSION, len(lengths),
                         max(lengths, default=0), min(lengths, default=0),
                         flags, delimiter[0])
    return encode_index(header, offsets)


def pack_records(records: Iterable[str | bytes],
                 delimiter: bytes = DEFAULT_DELIMITER) -> tuple[bytes, bytes]:
    """Lay out records as a (data, index) pair ready to be written to disk."""
    sep = b"\n" + delimiter + b"\n"
    chunks = []
    for i, r in enumerate(records):
        raw = r.encode("utf-8") if isinstance(r, str) else r
        if delimiter in raw.split(b"\n"):
            raise ValueError(
                f"Record {i + 1} contains a {delimiter!r} line: {raw[:40]!r}")
        chunks.append(raw + sep)
    data = b"".join(chunks)
    return data, build_index(data, delimiter)
