from io import StringIO
from pathlib import Path
from typing import Callable, Mapping, Protocol, TypeAlias

import pytest

from mdiff.cmd_base import Base
from mdiff.command import Command

MdiffCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str | bytes], None]
MakeUnreadable: TypeAlias = Callable[[str], None]


class MdiffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> MdiffCmdResult: ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str | bytes) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(contents)

    return _write_file


@pytest.fixture
def make_unreadable(work_path: Path) -> MakeUnreadable:
    def _make_unreadable(name: str) -> None:
        path = work_path / name
        path.chmod(0o200)

    return _make_unreadable


@pytest.fixture
def mdiff_cmd(work_path: Path) -> MdiffCmd:
    def _mdiff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> MdiffCmdResult:
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            work_path,
            dict(env or {}),
            ["mdiff", "diff", *argv],
            stdin,
            stdout,
            stderr,
        )
        return cmd, stdin, stdout, stderr

    return _mdiff_cmd
