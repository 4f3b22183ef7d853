"""Dataclass-based configuration schema for pixweave."""

from dataclasses import dataclass, field

from pixweave.core.reconcile import ResampleName


@dataclass(slots=True)
class ReconcileConfig:
    """Dimension reconciliation options."""

    resample: ResampleName = "triangle"


@dataclass(slots=True)
class OutputConfig:
    """Output options. Pixel layout is always 8-bit RGBA and not configurable."""

    report: str | None = None


@dataclass(slots=True)
class CombineConfig:
    """Top-level combine run configuration."""

    reconcile: ReconcileConfig = field(default_factory=ReconcileConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
