from __future__ import annotations

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "ul": 4,
    "reverse": 7,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

MODES = ("auto", "always", "never")


class Color:
    @staticmethod
    def format(style: str | list[str], text: str) -> str:
        names = [style] if isinstance(style, str) else list(style)

        try:
            codes = [SGR_CODES[name] for name in names]
        except KeyError as e:
            raise ValueError(f"Unknown style name: {e}") from e

        # a second colour in one style is the background
        foreground_seen = False
        for i, code in enumerate(codes):
            if 30 <= code <= 37:
                if foreground_seen:
                    codes[i] += 10
                foreground_seen = True

        code_str = ";".join(str(c) for c in codes)
        return f"\x1b[{code_str}m{text}\x1b[0m"

    @staticmethod
    def enabled(mode: str, isatty: bool) -> bool:
        if mode not in MODES:
            raise ValueError(f"invalid color mode '{mode}'")
        if mode == "auto":
            return isatty
        return mode == "always"
