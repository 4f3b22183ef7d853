"""Tyro CLI application entrypoint."""

from __future__ import annotations

import sys
from typing import Annotated

import tyro

from pixweave.cli import commands_combine, commands_probe
from pixweave.errors import ImageDataError


TopLevelCommand = Annotated[
    commands_combine.CombineCommand,
    tyro.conf.subcommand(name="combine"),
] | Annotated[
    commands_probe.ProbeCommand,
    tyro.conf.subcommand(name="probe"),
]


def dispatch(command: TopLevelCommand) -> None:
    """Dispatch parsed top-level command object."""

    if isinstance(command, commands_combine.CombineCommand):
        commands_combine.execute(command)
        return
    if isinstance(command, commands_probe.ProbeCommand):
        commands_probe.execute(command)
        return
    raise TypeError(f"Unsupported command type: {type(command).__name__}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run requested command."""

    command = tyro.cli(TopLevelCommand, args=argv)
    try:
        dispatch(command)
    except ImageDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
