"""Load combine configs from Python references or JSON files."""

from __future__ import annotations

import importlib
import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Any

from pixweave.config.schema import CombineConfig, OutputConfig, ReconcileConfig
from pixweave.storage.atomic import read_json


def _load_module(module_ref: str) -> ModuleType:
    path_candidate = Path(module_ref).expanduser()
    if path_candidate.exists():
        module_name = f"_pixweave_cfg_{path_candidate.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path_candidate)
        if spec is None or spec.loader is None:
            raise RuntimeError(f"Could not load module from path: {path_candidate}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return importlib.import_module(module_ref)


def _resolve_attr(obj: Any, attr_path: str) -> Any:
    value = obj
    for part in attr_path.split("."):
        value = getattr(value, part)
    return value


def load_object(reference: str) -> Any:
    """Load object by `module_or_path:attribute` reference."""

    if ":" not in reference:
        raise ValueError("Config reference must be in form 'module_or_path:attribute'.")
    module_ref, attr = reference.split(":", maxsplit=1)
    module = _load_module(module_ref)
    return _resolve_attr(module, attr)


def combine_config_from_dict(payload: dict[str, Any]) -> CombineConfig:
    """Reconstruct a CombineConfig from a plain dictionary."""

    reconcile = payload.get("reconcile", {})
    output = payload.get("output", {})
    return CombineConfig(
        reconcile=ReconcileConfig(**reconcile),
        output=OutputConfig(**output),
        log_level=str(payload.get("log_level", "INFO")),
    )


def load_combine_config(config_ref: str | None) -> CombineConfig:
    """Load a CombineConfig from a reference, a JSON file, or fall back to defaults.

    JSON files may hold either a bare config object or a run report with a
    ``config`` key.
    """

    if config_ref is None:
        return CombineConfig()

    if config_ref.endswith(".json"):
        payload = read_json(Path(config_ref).expanduser())
        if not isinstance(payload, dict):
            raise TypeError(f"Config file must contain a JSON object: {config_ref}")
        if isinstance(payload.get("config"), dict):
            payload = payload["config"]
        return combine_config_from_dict(payload)

    loaded = load_object(config_ref)
    if not isinstance(loaded, CombineConfig):
        type_name = type(loaded).__name__
        raise TypeError(
            f"Config reference must resolve to CombineConfig, got {type_name}."
        )
    return loaded
