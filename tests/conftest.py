"""Shared fixtures — category directories written under tmp_path."""

import random

import pytest

from fortune_store.index import pack_records


ART = [
    "A picture is worth a thousand words.",
    "Art is long,\nlife is short.",
    "Every artist dips his brush in his own soul,\nand paints his own nature\ninto his pictures.",
]

FOOD = [
    "Eat, drink and be merry.",
    "Crème brûlée > café au lait",
]


def write_category(directory, name, records, delimiter=b"%"):
    data, index = pack_records(records, delimiter)
    (directory / name).write_bytes(data)
    (directory / f"{name}.dat").write_bytes(index)
    return data, index


@pytest.fixture
def fortune_dir(tmp_path):
    """art + food valid, empty has a zero-length data file, plus a stray file."""
    write_category(tmp_path, "art", ART)
    write_category(tmp_path, "food", FOOD)
    _, index = pack_records(["placeholder"])
    (tmp_path / "empty").write_bytes(b"")
    (tmp_path / "empty.dat").write_bytes(index)
    (tmp_path / "README").write_text("not a category\n")
    return tmp_path


@pytest.fixture
def rng():
    return random.Random(1234)
