"""Example pixweave combine config."""

from pixweave.config.schema import CombineConfig, OutputConfig, ReconcileConfig


CONFIG = CombineConfig(
    reconcile=ReconcileConfig(
        resample="lanczos",
    ),
    output=OutputConfig(
        report="combine-report.json",
    ),
    log_level="DEBUG",
)
