"""Combine run states."""

from __future__ import annotations

from enum import Enum


class RunState(str, Enum):
    """Linear states of one combine run; FAILED is reachable from any of them."""

    START = "START"
    LOAD = "LOAD"
    VALIDATE_FORMATS = "VALIDATE_FORMATS"
    RECONCILE = "RECONCILE"
    INTERLEAVE = "INTERLEAVE"
    PACKAGE = "PACKAGE"
    SAVE = "SAVE"
    DONE = "DONE"
    FAILED = "FAILED"


RUN_SEQUENCE: tuple[RunState, ...] = (
    RunState.START,
    RunState.LOAD,
    RunState.VALIDATE_FORMATS,
    RunState.RECONCILE,
    RunState.INTERLEAVE,
    RunState.PACKAGE,
    RunState.SAVE,
    RunState.DONE,
)
