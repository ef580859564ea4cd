from __future__ import annotations

from typing import Sequence

from mdiff.change import Change
from mdiff.diff import diff

DIFF_FORMATS: dict[str, str] = {
    "meta": "bold",
    "frag": "cyan",
    "old": "red",
    "new": "green",
}


class PrintDiffMixin:
    def diff_fmt(self, name: str, text: str) -> str:
        style_str = self.env.get(f"MDIFF_COLOR_{name.upper()}")

        if style_str:
            style: str | list[str] = style_str.split()
        else:
            style = DIFF_FORMATS[name]

        return self.fmt(style, text)

    def print_diff(self, a: Sequence[str], b: Sequence[str]) -> list[Change]:
        result = diff(a, b)
        changes = Change.filter(result, len(a), len(b))

        for change in changes:
            self.print_change(change, a, b)

        return changes

    def print_change(self, change: Change, a: Sequence[str], b: Sequence[str]) -> None:
        self.println(self.diff_fmt("frag", change.header()))

        for i in change.a:
            self.println(self.diff_fmt("old", f"<{a[i]}"))

        if change.kind == "c":
            self.println(self.diff_fmt("meta", "---"))

        for i in change.b:
            self.println(self.diff_fmt("new", f">{b[i]}"))
