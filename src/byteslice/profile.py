from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def default_profile() -> Dict[str, Any]:
    return {
        "output": None,  # None or "-" means stdout
        "logging": {
            "level": "WARNING",
            "file": None,
            "module_levels": "",  # e.g. "copier=DEBUG,range=INFO"
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(out.get(key), dict) and isinstance(value, dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


def load_profile(profile_path: Optional[Path]) -> Dict[str, Any]:
    if profile_path is None:
        return default_profile()

    profile_path = Path(profile_path)
    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    data = yaml.safe_load(profile_path.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Profile YAML must be a mapping")

    defaults = default_profile()
    unknown = sorted(set(data) - set(defaults))
    if unknown:
        raise ValueError(f"Unknown profile keys: {', '.join(unknown)}")
    profile = _merge(defaults, data)

    level = (profile.get("logging") or {}).get("level")
    if level is not None and not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ValueError(f"Unknown logging level in profile: {level}")
    return profile
