"""
Resource provider tests — filesystem, packaged data and fallback chains.
"""

import sys

import pytest

from fortune_store.errors import ResourceNotFound
from fortune_store.resources import (DirectoryProvider, FallbackProvider, PackageProvider,
                                     join)
from fortune_store.store import CategoryStore

from conftest import ART, write_category


@pytest.fixture
def packaged(tmp_path, monkeypatch):
    """An importable package `fortune_pack` with cookies under fortune/."""
    pkg = tmp_path / "site" / "fortune_pack"
    (pkg / "fortune").mkdir(parents=True)
    (pkg / "__init__.py").write_text("")
    write_category(pkg / "fortune", "art", ART)
    monkeypatch.delitem(sys.modules, "fortune_pack", raising=False)
    monkeypatch.syspath_prepend(str(tmp_path / "site"))
    return pkg


class TestJoin:

    def test_join(self):
        assert join("/fortune", "art.dat") == "/fortune/art.dat"
        assert join("/fortune/", "art") == "/fortune/art"
        assert join("", "art") == "art"


class TestDirectoryProvider:

    def test_list_sorted(self, fortune_dir):
        names = DirectoryProvider().list(str(fortune_dir))
        assert names == sorted(names)
        assert {"art", "art.dat", "empty", "empty.dat"} <= set(names)

    def test_read(self, fortune_dir):
        assert DirectoryProvider(fortune_dir).read("art").startswith(b"A picture")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceNotFound):
            DirectoryProvider().read(str(tmp_path / "missing"))

    def test_read_directory(self, tmp_path):
        with pytest.raises(ResourceNotFound):
            DirectoryProvider().read(str(tmp_path))

    def test_list_file(self, fortune_dir):
        with pytest.raises(ResourceNotFound):
            DirectoryProvider().list(str(fortune_dir / "art"))

    def test_not_found_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DirectoryProvider().read(str(tmp_path / "missing"))


class TestPackageProvider:

    def test_list_and_read(self, packaged):
        provider = PackageProvider("fortune_pack")
        assert provider.list("fortune") == ["art", "art.dat"]
        assert provider.read("fortune/art") == (packaged / "fortune" / "art").read_bytes()

    def test_missing_package(self):
        with pytest.raises(ResourceNotFound):
            PackageProvider("no_such_fortune_pack").list("fortune")

    def test_missing_resource(self, packaged):
        provider = PackageProvider("fortune_pack")
        with pytest.raises(ResourceNotFound):
            provider.read("fortune/food")
        with pytest.raises(ResourceNotFound):
            provider.list("nothing")

    def test_store_from_package(self, packaged):
        store = CategoryStore.load("fortune", PackageProvider("fortune_pack"))
        assert store.categories == ["art"]
        assert store.get_fortune("art", 1).lines == (ART[0],)


class TestFallbackProvider:

    def test_first_answer_wins(self, fortune_dir, packaged):
        provider = FallbackProvider(DirectoryProvider(fortune_dir), PackageProvider("fortune_pack"))
        assert "food" in provider.list("")

    def test_falls_through(self, tmp_path, packaged):
        provider = FallbackProvider(DirectoryProvider(tmp_path / "nope"), PackageProvider("fortune_pack"))
        store = CategoryStore.load("fortune", provider)
        assert store.categories == ["art"]

    def test_all_fail(self, tmp_path):
        provider = FallbackProvider(DirectoryProvider(tmp_path))
        with pytest.raises(ResourceNotFound):
            provider.read("missing")

    def test_needs_a_provider(self):
        with pytest.raises(ValueError):
            FallbackProvider()
