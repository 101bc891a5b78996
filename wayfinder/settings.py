# wayfinder/settings.py
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import SettingsError

DEFAULTS = {
    "router": {
        "schemes": None,  # None => any scheme
        "decode_plus": False,
        "keep_encoded_slashes": False,
    },
    "logging": {"level": "WARNING"}
}

def _config_path() -> Path:
    base = Path.home() / ".config" / "wayfinder"
    base.mkdir(parents=True, exist_ok=True)
    return base / "config.json"

def _merge(defaults: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

def _validate(data: Dict[str, Any], source: Path) -> None:
    router = data["router"]
    if not isinstance(router, dict):
        raise SettingsError(f"{source}: 'router' must be an object")
    schemes = router.get("schemes")
    if schemes is not None and (
        not isinstance(schemes, list) or not all(isinstance(s, str) for s in schemes)
    ):
        raise SettingsError(f"{source}: 'router.schemes' must be null or a list of strings")
    if not isinstance(router.get("decode_plus"), bool):
        raise SettingsError(f"{source}: 'router.decode_plus' must be true or false")
    if not isinstance(router.get("keep_encoded_slashes"), bool):
        raise SettingsError(f"{source}: 'router.keep_encoded_slashes' must be true or false")
    if not isinstance(data["logging"], dict) or not isinstance(data["logging"].get("level"), str):
        raise SettingsError(f"{source}: 'logging.level' must be a string")

def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read settings, creating the default file in the home config dir on first use.

    An explicit ``path`` must already exist.
    """
    if path is not None and not Path(path).exists():
        raise SettingsError(f"Settings file {path} does not exist")
    p = Path(path) if path is not None else _config_path()
    if not p.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(DEFAULTS, indent=2))
        return copy.deepcopy(DEFAULTS)
    try:
        data = json.loads(p.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(f"Cannot read settings from {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"{p}: settings must be a JSON object")
    merged = _merge(DEFAULTS, data)
    _validate(merged, p)
    return merged

def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    p = Path(path) if path is not None else _config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2))
