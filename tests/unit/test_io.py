import stat
from pathlib import Path

import pytest

from identicon.errors import IdenticonError, ImageWriteError
from identicon.utils.io import atomic_write_bytes


def test_atomic_write_creates_file(tmp_path: Path) -> None:
    target = tmp_path / "out.png"
    atomic_write_bytes(target, b"payload")
    assert target.read_bytes() == b"payload"


def test_atomic_write_replaces_existing(tmp_path: Path) -> None:
    target = tmp_path / "out.png"
    target.write_bytes(b"old")
    atomic_write_bytes(target, b"new")
    assert target.read_bytes() == b"new"


def test_atomic_write_leaves_no_temp_files(tmp_path: Path) -> None:
    atomic_write_bytes(tmp_path / "out.png", b"data")
    assert [p.name for p in tmp_path.iterdir()] == ["out.png"]


def test_atomic_write_missing_directory_raises(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "out.png"
    with pytest.raises(ImageWriteError):
        atomic_write_bytes(target, b"data")
    assert not target.exists()


def test_atomic_write_error_is_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        atomic_write_bytes(tmp_path / "missing" / "out.png", b"data")


def test_atomic_write_failed_replace_cleans_up(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_replace(src: object, dst: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr("identicon.utils.io.os.replace", failing_replace)
    with pytest.raises(IdenticonError):
        atomic_write_bytes(tmp_path / "out.png", b"data")
    assert list(tmp_path.iterdir()) == []


def test_atomic_write_honours_umask_like_plain_write(tmp_path: Path) -> None:
    target = tmp_path / "out.png"
    plain = tmp_path / "plain.png"
    atomic_write_bytes(target, b"data")
    plain.write_bytes(b"data")
    assert stat.S_IMODE(target.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)
