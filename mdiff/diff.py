from __future__ import annotations

from typing import Sequence, TypeVar, Union

from mdiff.diff_result import DiffResult
from mdiff.myers import Myers

T = TypeVar("T")


def lines(document: Union[str, Sequence[str]]) -> list[str]:
    if isinstance(document, str):
        return document.splitlines()
    return list(document)


def diff(a: Union[str, Sequence[T]], b: Union[str, Sequence[T]]) -> DiffResult:
    lhs = lines(a) if isinstance(a, str) else a
    rhs = lines(b) if isinstance(b, str) else b
    return Myers.diff(lhs, rhs)
