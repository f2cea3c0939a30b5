import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional


# ----------------------------
# Defaults
# ----------------------------

SETTINGS_FILENAME = ".ppath.json"
SETTINGS_ENV = "PPATH_SETTINGS"

DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644

DEFAULT_SETTINGS = {
    "permissions": {
        "dir_mode": "755",
    },
    "logging": {"level": "WARNING"},
}


# ----------------------------
# Loading
# ----------------------------

def _find_settings_file(
    settings_path: Optional[Path],
    root: Optional[Path],
) -> Optional[Path]:
    if settings_path is not None:
        if not settings_path.exists():
            raise RuntimeError(f"Settings file not found: {settings_path}")
        return settings_path

    env_path = os.environ.get(SETTINGS_ENV, "").strip()
    if env_path:
        p = Path(os.path.expandvars(os.path.expanduser(env_path)))
        if not p.exists():
            raise RuntimeError(f"{SETTINGS_ENV} points to missing file: {p}")
        return p

    if root is not None:
        local = root / SETTINGS_FILENAME
        if local.exists():
            return local

    return None


def load_settings(
    root: Optional[Path] = None,
    settings_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Load settings, merging the user's JSON file over DEFAULT_SETTINGS.

    Lookup order: explicit settings_path, $PPATH_SETTINGS, <root>/.ppath.json.
    """
    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    path = _find_settings_file(settings_path, root)
    if path is None:
        return merged

    with open(path, "r", encoding="utf-8") as f:
        user_settings = json.load(f)

    for k, v in user_settings.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k].update(v)
        else:
            merged[k] = v

    return merged


def _parse_mode(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 8)
    except ValueError:
        raise ValueError(f"Invalid permission bits: {value!r}") from None


def resolve_dir_mode(settings: Dict[str, Any]) -> int:
    """
    Permission bits for directories ppath creates.
    """
    perms = settings.get("permissions") or {}
    if not isinstance(perms, dict):
        raise ValueError(f"\"permissions\" must be an object, got {perms!r}")
    return _parse_mode(perms.get("dir_mode"), DEFAULT_DIR_MODE)


def resolve_log_level(settings: Dict[str, Any]) -> str:
    """
    Validated logging level name, e.g. "WARNING".
    """
    section = settings.get("logging") or {}
    if not isinstance(section, dict):
        raise ValueError(f"\"logging\" must be an object, got {section!r}")
    level = str(section.get("level") or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return level
