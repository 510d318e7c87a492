# src/gcecloud/config_loader.py

from __future__ import annotations
import re
from pathlib import Path
from typing import Any, Dict
import yaml


class ConfigError(ValueError):
    pass


_VERSION_TOKEN = re.compile(r"[a-z0-9][a-z0-9_.-]*")


def _require(d: Dict[str, Any], dotted: str, typ: type) -> Any:
    cur: Any = d
    for k in dotted.split("."):
        if not isinstance(cur, dict) or k not in cur:
            raise ConfigError(f"Missing config key: {dotted}")
        cur = cur[k]
    if typ is str and not isinstance(cur, str):
        raise ConfigError(f"'{dotted}' must be a string")
    if typ is str and not cur.strip():
        raise ConfigError(f"'{dotted}' must not be empty")
    return cur


def load_config(path: Path) -> Dict[str, Any]:
    if not path or not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = yaml.safe_load(path.read_text())
    if not isinstance(raw, dict) or not raw:
        raise ConfigError(f"Config is empty or invalid YAML: {path}")

    # Validate required keys (no defaults here)
    _require(raw, "compute.endpoint", str)
    _require(raw, "compute.api_version", str)

    # Normalise the version token; the endpoint itself is checked when it is rewritten
    version = raw["compute"]["api_version"].strip().lower()
    if not _VERSION_TOKEN.fullmatch(version):
        raise ConfigError(f"Invalid compute.api_version '{version}' (expected a bare token such as 'v1', 'beta' or 'alpha').")
    raw["compute"]["api_version"] = version
    raw["compute"]["endpoint"] = raw["compute"]["endpoint"].strip()

    return raw
