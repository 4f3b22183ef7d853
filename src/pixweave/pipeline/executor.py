"""Combine pipeline: load, validate, reconcile, interleave, package, save."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
import logging
from pathlib import Path
import time
import traceback
from typing import Any
from uuid import uuid4

from pixweave.config.schema import CombineConfig
from pixweave.core.buffer import PixelBuffer
from pixweave.core.interleave import interleave_images
from pixweave.core.reconcile import smallest_dimensions, standardize
from pixweave.errors import DifferentImageFormats
from pixweave.imaging.codec import DecodedImage, load_image, save_image
from pixweave.observability.logging import RunLogger, bind_logger, get_logger, log_event
from pixweave.pipeline.stage import RUN_SEQUENCE, RunState


_LOGGER = get_logger("pixweave.executor")


@dataclass(slots=True)
class _RunTracker:
    """Walks RUN_SEQUENCE one state at a time; FAILED may be entered from anywhere."""

    logger: RunLogger
    state: RunState = RunState.START
    visited: list[str] = field(default_factory=lambda: [RunState.START.value])

    def _enter(self, state: RunState) -> None:
        self.state = state
        self.visited.append(state.value)
        log_event(self.logger, "state_entered", level=logging.DEBUG, state=state.value)

    def advance(self, state: RunState) -> None:
        if self.state in (RunState.DONE, RunState.FAILED):
            raise RuntimeError(f"Run already finished in state {self.state.value}")
        expected = RUN_SEQUENCE[RUN_SEQUENCE.index(self.state) + 1]
        if state is not expected:
            raise RuntimeError(
                f"Illegal transition {self.state.value} -> {state.value}, expected {expected.value}"
            )
        self._enter(state)

    def fail(self) -> str:
        failed_state = self.state.value
        self._enter(RunState.FAILED)
        return failed_state


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _validate_formats(first: DecodedImage, second: DecodedImage) -> str:
    if first.format != second.format:
        raise DifferentImageFormats(first.format, second.format)
    return first.format


def run_combine(
    first: Path,
    second: Path,
    output: Path,
    config: CombineConfig | None = None,
    run_id: str | None = None,
    raise_on_error: bool = True,
) -> dict[str, Any]:
    """Interleave two images into ``output`` and return the run record.

    Any failure aborts the run. With ``raise_on_error`` the error propagates;
    otherwise a FAILED record is returned.
    """

    cfg = config if config is not None else CombineConfig()
    if run_id is None:
        run_id = uuid4().hex
    logger = bind_logger(_LOGGER, run_id=run_id)
    tracker = _RunTracker(logger=logger)

    started = time.perf_counter()
    record: dict[str, Any] = {
        "run_id": run_id,
        "status": "RUNNING",
        "started_at": _now(),
        "inputs": [str(first), str(second)],
        "output": str(output),
        "config": asdict(cfg),
        "states": tracker.visited,
    }
    log_event(
        logger,
        "combine_started",
        first=str(first),
        second=str(second),
        output=str(output),
    )

    try:
        tracker.advance(RunState.LOAD)
        decoded_a = load_image(first)
        decoded_b = load_image(second)
        record["input_dimensions"] = [list(decoded_a.dimensions), list(decoded_b.dimensions)]

        tracker.advance(RunState.VALIDATE_FORMATS)
        image_format = _validate_formats(decoded_a, decoded_b)
        record["format"] = image_format

        tracker.advance(RunState.RECONCILE)
        pair = standardize(decoded_a.image, decoded_b.image, resample=cfg.reconcile.resample)
        width, height = pair.dimensions
        record["dimensions"] = [width, height]
        record["resized"] = pair.resized
        log_event(
            logger,
            "dimensions_reconciled",
            width=width,
            height=height,
            resized=pair.resized,
        )

        tracker.advance(RunState.INTERLEAVE)
        combined = interleave_images(pair.first, pair.second)

        tracker.advance(RunState.PACKAGE)
        buffer = PixelBuffer.create(width, height, str(output))
        buffer.assign(combined)

        tracker.advance(RunState.SAVE)
        save_image(buffer, image_format)

        tracker.advance(RunState.DONE)
    except Exception as exc:
        failed_state = tracker.fail()
        record.update(
            status="FAILED",
            failed_state=failed_state,
            finished_at=_now(),
            elapsed_sec=time.perf_counter() - started,
            error=f"{type(exc).__name__}: {exc}",
            traceback=traceback.format_exc(),
        )
        log_event(
            logger,
            "combine_finished",
            level=logging.ERROR,
            status="FAILED",
            failed_state=failed_state,
            error=record["error"],
        )
        if raise_on_error:
            raise
        return record

    record.update(
        status="SUCCEEDED",
        finished_at=_now(),
        elapsed_sec=time.perf_counter() - started,
    )
    log_event(
        logger,
        "combine_finished",
        status="SUCCEEDED",
        width=width,
        height=height,
        format=image_format,
    )
    return record


def probe_pair(first: Path, second: Path) -> dict[str, Any]:
    """Describe how two images would be combined without touching any pixels."""

    decoded_a = load_image(first)
    decoded_b = load_image(second)
    target = smallest_dimensions(decoded_a.dimensions, decoded_b.dimensions)

    if decoded_a.dimensions == target and decoded_b.dimensions == target:
        resized = None
    elif decoded_b.dimensions == target:
        resized = "first"
    else:
        resized = "second"

    return {
        "inputs": [
            {
                "path": str(decoded.path),
                "format": decoded.format,
                "dimensions": list(decoded.dimensions),
            }
            for decoded in (decoded_a, decoded_b)
        ],
        "compatible": decoded_a.format == decoded_b.format,
        "target_dimensions": list(target),
        "resized": resized,
    }
