from __future__ import annotations

from pathlib import Path
from typing import TextIO

from mdiff.diff import lines

STDIN_NAME = "-"


class Inputs:
    class MissingFile(Exception):
        pass

    class NoPermission(Exception):
        pass

    class NotAFile(Exception):
        pass

    class BadEncoding(Exception):
        pass

    def __init__(self, stdin: TextIO) -> None:
        self.stdin = stdin

    def read_lines(self, name: str, base: Path) -> list[str]:
        if name == STDIN_NAME:
            return lines(self.stdin.read())

        path = base / name
        try:
            with open(path, encoding="utf-8") as f:
                return lines(f.read())
        except FileNotFoundError:
            raise Inputs.MissingFile(f"{name}: No such file or directory")
        except PermissionError:
            raise Inputs.NoPermission(f"open(\"{name}\"): Permission denied")
        except IsADirectoryError:
            raise Inputs.NotAFile(f"{name}: Is a directory")
        except UnicodeDecodeError:
            raise Inputs.BadEncoding(f"{name}: not valid UTF-8 text")
