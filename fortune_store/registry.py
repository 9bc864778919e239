# fortune_store/registry.py   – process‑wide handle on the current store
from __future__ import annotations

import logging
import os
import threading

from .models import Fortune, FortuneCategory
from .resources import ResourceProvider
from .store import CategoryStore

FORTUNE_DIR = os.getenv("FORTUNE_DIR", "/fortune")

log = logging.getLogger(__name__)

_store: CategoryStore | None = None
_load_lock = threading.Lock()


# ── public api ───────────────────────────────────────────────
def reload(directory: str | None = None,
           provider: ResourceProvider | None = None) -> CategoryStore:
    """Build a fresh store and publish it; on failure the old one stays."""
    global _store
    fresh = CategoryStore.load(FORTUNE_DIR if directory is None else directory, provider)
    _store = fresh                               # single reference swap
    log.info("Published store with %d categories", len(fresh))
    return fresh


def get_store() -> CategoryStore:
    store = _store
    if store is not None:
        return store
    with _load_lock:
        return _store if _store is not None else reload()


def fortune(category: str | None = None, number: int | None = None) -> Fortune:
    """Random fortune, random within ``category``, or cookie ``number`` of it."""
    store = get_store()
    if category is None:
        if number is not None:
            raise ValueError("A cookie number needs a category")
        return store.get_random_fortune()
    if number is None:
        return store.get_random_fortune_from_category(category)
    return store.get_fortune(category, number)


def categories() -> list[FortuneCategory]:
    return get_store().list_categories()


def reset() -> None:
    """Forget the published store (next access loads again)."""
    global _store
    _store = None
