from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from mdiff.cmd_base import Base
from mdiff.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["mdiff", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--color",
    "color",
    flag_value="always",
    default=None,
    help="Always colour the output (default: only on a terminal).",
)
@click.option(
    "--no-color",
    "color",
    flag_value="never",
    help="Never colour the output.",
)
@click.option("--no-pager", is_flag=True, help="Do not pipe output into a pager.")
@click.argument("file1", type=str)
@click.argument("file2", type=str)
def cli(color: Optional[str], no_pager: bool, file1: str, file2: str) -> None:
    """Compare FILE1 and FILE2 line by line ('-' reads standard input)."""
    cmd_args: list[str] = []

    if color is not None:
        cmd_args.append(f"--color={color}")

    if no_pager:
        cmd_args.append("--no-pager")

    run_cmd("diff", *cmd_args, "--", file1, file2)


if __name__ == "__main__":
    cli()
