"""`pixweave probe` command."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Annotated

import tyro

from pixweave.pipeline.executor import probe_pair


@dataclass(slots=True)
class ProbeCommand:
    """Report formats, dimensions and the reconciled size for two images."""

    first: Annotated[Path, tyro.conf.Positional]
    second: Annotated[Path, tyro.conf.Positional]


def execute(command: ProbeCommand) -> None:
    payload = probe_pair(command.first, command.second)
    print(json.dumps(payload, indent=2, sort_keys=True))
