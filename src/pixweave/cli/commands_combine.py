"""`pixweave combine` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Annotated

import tyro

from pixweave.config.loader import load_combine_config
from pixweave.core.reconcile import ResampleName
from pixweave.observability.logging import configure_logging
from pixweave.pipeline.executor import run_combine
from pixweave.storage.atomic import atomic_write_json


@dataclass(slots=True)
class CombineCommand:
    """Interleave the pixels of two same-format images into one output image."""

    first: Annotated[Path, tyro.conf.Positional]
    second: Annotated[Path, tyro.conf.Positional]
    output: Path
    config: str | None = None
    resample: ResampleName | None = None
    report: Path | None = None
    log_level: str | None = None


def execute(command: CombineCommand) -> None:
    cfg = load_combine_config(command.config)
    if command.resample is not None:
        cfg.reconcile.resample = command.resample
    if command.report is not None:
        cfg.output.report = str(command.report)
    if command.log_level is not None:
        cfg.log_level = command.log_level
    configure_logging(cfg.log_level)

    record = run_combine(
        first=command.first,
        second=command.second,
        output=command.output,
        config=cfg,
        raise_on_error=False,
    )
    if cfg.output.report is not None:
        atomic_write_json(Path(cfg.output.report), record)

    if record["status"] != "SUCCEEDED":
        print(f"error: {record['error']}", file=sys.stderr)
        raise SystemExit(1)

    width, height = record["dimensions"]
    print(
        f"combined run_id={record['run_id']} output={record['output']} "
        f"format={record['format']} width={width} height={height}"
    )
