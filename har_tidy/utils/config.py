from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merges override into base (override wins).
    """
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, Mapping):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads a YAML config file with optional inheritance via:
      extends: "base.yaml"
    or
      extends:
        - "base.yaml"
        - "local.yaml"

    Parents are merged in order, the file itself last.
    Paths in 'extends' are resolved relative to the current config file.
    """
    path = Path(path)
    cfg = load_yaml(path)

    extends = cfg.pop("extends", None)
    merged: Dict[str, Any] = {}

    if extends:
        if isinstance(extends, (str, Path)):
            parents = [extends]
        elif isinstance(extends, list):
            parents = extends
        else:
            raise ValueError("Config key 'extends' must be a string or a list of strings.")

        for parent in parents:
            parent_path = Path(parent)
            if not parent_path.is_absolute():
                parent_path = (path.parent / parent_path).resolve()
            merged = _deep_merge(merged, load_config(parent_path))

    merged = _deep_merge(merged, cfg)

    merged.setdefault("_meta", {})
    merged["_meta"]["config_path"] = str(path.resolve())
    return merged


def apply_overrides(cfg: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Applies dotted-key overrides (e.g. {"output.tidy_dataset": "out.csv"}).
    None values are ignored so unset CLI flags don't clobber the config.
    """
    out = dict(cfg)
    for dotted, value in overrides.items():
        if value is None:
            continue
        nested: Any = value
        for part in reversed(dotted.split(".")):
            nested = {part: nested}
        out = _deep_merge(out, nested)
    return out

