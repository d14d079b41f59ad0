from __future__ import annotations

from pathlib import Path

import pytest

from trunkflow.platform.files import atomic_write_text


def test_atomic_write_creates_file(tmp_path: Path) -> None:
    target = tmp_path / "release.json"
    atomic_write_text(target, "{}\n")
    assert target.read_text(encoding="utf-8") == "{}\n"


def test_atomic_write_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "release.json"
    target.write_text("old", encoding="utf-8")
    atomic_write_text(target, "new")
    assert target.read_text(encoding="utf-8") == "new"


def test_atomic_write_leaves_no_temp_files(tmp_path: Path) -> None:
    atomic_write_text(tmp_path / "release.json", "x")
    assert [p.name for p in tmp_path.iterdir()] == ["release.json"]


def test_atomic_write_keeps_utf8(tmp_path: Path) -> None:
    target = tmp_path / "release.json"
    atomic_write_text(target, "café\n")
    assert target.read_bytes() == "café\n".encode("utf-8")


def test_atomic_write_failure_keeps_original(tmp_path: Path) -> None:
    target = tmp_path / "release.json"
    target.mkdir()

    with pytest.raises(OSError):
        atomic_write_text(target, "{}\n")

    assert target.is_dir()
    assert [p.name for p in tmp_path.iterdir()] == ["release.json"]
