from __future__ import annotations

from pathlib import Path
from typing import MutableMapping, TextIO, Type

from mdiff.cmd_base import Base
from mdiff.cmd_diff import Diff
from mdiff.setup_logging import LOG_LEVEL, InvalidLogLevel, setup_logging


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "diff": Diff,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a mdiff command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)

        try:
            setup_logging(
                level=env.get("MDIFF_LOG_LEVEL", LOG_LEVEL),
                log_file=env.get("MDIFF_LOG_FILE"),
            )
        except InvalidLogLevel as e:
            cmd.eprintln(f"fatal: {e}")
            cmd.status = 1
            return cmd

        cmd.execute()

        return cmd
