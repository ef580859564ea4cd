from __future__ import annotations

import logging

from mdiff.cmd_base import Base
from mdiff.cmd_color import MODES, Color
from mdiff.inputs import STDIN_NAME, Inputs
from mdiff.print_diff import PrintDiffMixin

log = logging.getLogger(__name__)


class Diff(PrintDiffMixin, Base):
    def run(self) -> None:
        self.paths: list[str] = []
        self.color_mode = "auto"
        self.use_pager = True

        self.define_options()

        if len(self.paths) < 2:
            self.usage_error("not enough arguments")
        if len(self.paths) > 2:
            self.usage_error("too many arguments")
        if self.paths.count(STDIN_NAME) > 1:
            self.usage_error("standard input can only be compared once")

        self.color = Color.enabled(self.color_mode, self.isatty)

        try:
            inputs = Inputs(self.stdin)
            a = inputs.read_lines(self.paths[0], self.dir)
            b = inputs.read_lines(self.paths[1], self.dir)
        except (
            Inputs.MissingFile,
            Inputs.NoPermission,
            Inputs.NotAFile,
            Inputs.BadEncoding,
        ) as e:
            self.handle_input_error(e)

        log.debug(f"comparing {self.paths[0]!r} with {self.paths[1]!r}")
        log.debug(f"{len(a)} lines against {len(b)} lines")

        if self.use_pager:
            self.setup_pager()

        self.print_diff(a, b)
        self.exit(0)

    def define_options(self) -> None:
        args = iter(self.args)

        for arg in args:
            if arg == "--":
                self.paths.extend(args)
            elif arg == "--color":
                self.color_mode = "always"
            elif arg.startswith("--color="):
                self.color_mode = arg.split("=", 1)[1]
                if self.color_mode not in MODES:
                    self.usage_error(f"invalid color mode '{self.color_mode}'")
            elif arg == "--no-color":
                self.color_mode = "never"
            elif arg == "--no-pager":
                self.use_pager = False
            elif arg.startswith("-") and arg != STDIN_NAME:
                self.usage_error(f"unknown option '{arg}'")
            else:
                self.paths.append(arg)

    def usage_error(self, message: str) -> None:
        self.stderr.write(f"fatal: {message}\n")
        self.stderr.write("usage: mdiff [--color[=<when>]] [--no-pager] <file1> <file2>\n")
        self.exit(1)

    def handle_input_error(self, exc: Exception) -> None:
        self.stderr.write(f"fatal: {exc}\n")
        self.exit(1)
