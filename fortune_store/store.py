# ==================================================
# fortune_store/store.py
# ==================================================
from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import Mapping, Optional

from .const import INDEX_SUFFIX, HEADER_SIZE
from .errors import InvalidArgument, OutOfRange, UnknownCategory
from .index import decode_index, offsets_monotonic
from .models import CategoryRecord, Fortune, FortuneCategory
from .resources import DirectoryProvider, ResourceProvider, join

log = logging.getLogger(__name__)


def is_valid_pair(data: Optional[bytes], index: Optional[bytes]) -> bool:
    """Cheap structural check before decoding: data non‑empty, index > 23 bytes."""
    if data is None or index is None:
        return False
    return len(data) > 0 and len(index) >= HEADER_SIZE


class CategoryStore:
    """Read‑only map of category name → CategoryRecord, built once."""
    def __init__(self, records: Mapping[str, CategoryRecord],
                 rng: random.Random | None = None):
        self._records = MappingProxyType(dict(records))
        self._names   = tuple(self._records)
        self._rng     = rng if rng is not None else random.SystemRandom()

    # ------------------------------------------------------------------
    @classmethod
    def load(cls, directory: str,
             provider: ResourceProvider | None = None,
             rng: random.Random | None = None) -> "CategoryStore":
        """
        Build a store from every ``<name>.dat`` / ``<name>`` pair in ``directory``.
        • an unreadable listing or file aborts the load (ResourceNotFound);
        • a pair failing ``is_valid_pair`` is logged and skipped;
        • an index that does not decode aborts the load (MalformedIndex).
        """
        provider = provider if provider is not None else DirectoryProvider()
        log.debug("Looking for data files in %s", directory)

        records: dict[str, CategoryRecord] = {}
        for entry in provider.list(directory):
            if not entry.endswith(INDEX_SUFFIX):
                continue
            category   = entry[:-len(INDEX_SUFFIX)]
            index_path = join(directory, entry)
            data_path  = join(directory, category)
            index_raw  = provider.read(index_path)
            data_raw   = provider.read(data_path)
            if not is_valid_pair(data_raw, index_raw):
                log.warning("Failed to load either data [%s] or structure [%s] file",
                            data_path, index_path)
                continue

            header, offsets = decode_index(index_raw)
            if not offsets_monotonic(offsets):
                log.warning("Offsets of category %s are not ordered; "
                            "some records will fail to extract", category)
            records[category] = CategoryRecord(category, header, offsets, bytes(data_raw))

        log.info("Initialization completed, loaded categories %s from %s",
                 sorted(records), directory)
        return cls(records, rng)

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, category) -> bool:
        return category in self._records

    @property
    def categories(self) -> list[str]:
        return sorted(self._names)

    def _record(self, category: str, message: str = "Category {} is not setup.") -> CategoryRecord:
        try:
            return self._records[category]
        except KeyError:
            raise UnknownCategory(message.format(category)) from None

    def _random_from(self, record: CategoryRecord) -> Fortune:
        total = record.total_records
        if total < 1:
            raise OutOfRange(f"Category {record.category} holds no cookies.")
        lucky = self._rng.randrange(total)
        log.debug("Selected cookie %d from %d for category %s.", lucky, total, record.category)
        return record.extract(lucky)

    # ── queries ────────────────────────────────────────────────────
    def get_fortune(self, category: str, number: int) -> Fortune:
        log.debug("Looking for cookie # %s from category %s", number, category)
        record = self._record(category)
        if number < 1:
            raise InvalidArgument("Cookie number should be positive.")
        if number > record.total_records:
            raise OutOfRange(f"Category {category} only contains "
                             f"{record.total_records} cookie(s).")
        return record.extract(number - 1)

    def get_random_fortune(self) -> Fortune:
        if not self._names:
            raise UnknownCategory("No fortune categories are loaded.")
        category = self._names[self._rng.randrange(len(self._names))]
        return self._random_from(self._records[category])

    def get_random_fortune_from_category(self, category: str) -> Fortune:
        record = self._record(category, "No fortunes for category [{}] available.")
        return self._random_from(record)

    def get_category_info(self, category: str) -> FortuneCategory:
        return self._record(category).summary()

    def list_categories(self) -> list[FortuneCategory]:
        return [rec.summary() for rec in self._records.values()]
