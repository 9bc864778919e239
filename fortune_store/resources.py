# ==================================================
# fortune_store/resources.py
# ==================================================
"""Where category files come from: a directory, packaged data, or both."""
from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path
from typing import Protocol

from .errors import ResourceNotFound

log = logging.getLogger(__name__)


def join(parent: str, name: str) -> str:
    return f"{parent.rstrip('/')}/{name}" if parent else name


class ResourceProvider(Protocol):
    def list(self, path: str) -> list[str]: ...
    def read(self, path: str) -> bytes: ...


class DirectoryProvider:
    """Plain filesystem; relative paths resolve against ``root``."""
    def __init__(self, root: str | os.PathLike | None = None):
        self.root = Path(root) if root is not None else None

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        return self.root / p if self.root is not None else p

    def list(self, path: str) -> list[str]:
        target = self._resolve(path)
        log.debug("Listing %s", target)
        try:
            return sorted(entry.name for entry in target.iterdir())
        except OSError as e:
            raise ResourceNotFound(f"Failed to list directory [{target}]") from e

    def read(self, path: str) -> bytes:
        target = self._resolve(path)
        log.debug("Reading %s", target)
        try:
            return target.read_bytes()
        except OSError as e:
            raise ResourceNotFound(f"Failed to find any resource at path [{target}]") from e


class PackageProvider:
    """Data shipped inside an importable package (``importlib.resources``)."""
    def __init__(self, anchor: str):
        self.anchor = anchor

    def _resolve(self, path: str):
        try:
            node = resources.files(self.anchor)
        except (ImportError, TypeError) as e:
            raise ResourceNotFound(f"No package resources under [{self.anchor}]") from e
        for part in path.strip("/").split("/"):
            if part:
                node = node.joinpath(part)
        return node

    def list(self, path: str) -> list[str]:
        node = self._resolve(path)
        if not node.is_dir():
            raise ResourceNotFound(f"Failed to list resource [{self.anchor}:{path}]")
        return sorted(entry.name for entry in node.iterdir())

    def read(self, path: str) -> bytes:
        node = self._resolve(path)
        try:
            return node.read_bytes()
        except OSError as e:
            raise ResourceNotFound(
                f"Failed to find any resource at path [{self.anchor}:{path}]") from e


class FallbackProvider:
    """Try each provider in turn; the first one that answers wins."""
    def __init__(self, *providers: ResourceProvider):
        if not providers:
            raise ValueError("FallbackProvider needs at least one provider")
        self.providers = providers

    def _first(self, op: str, path: str):
        for provider in self.providers:
            try:
                return getattr(provider, op)(path)
            except ResourceNotFound:
                log.debug("%s could not %s %s", type(provider).__name__, op, path)
        raise ResourceNotFound(f"Failed to find any resource at path [{path}]")

    def list(self, path: str) -> list[str]:
        return self._first("list", path)

    def read(self, path: str) -> bytes:
        return self._first("read", path)
