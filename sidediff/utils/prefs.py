# sidediff/utils/prefs.py

import json
from pathlib import Path
from platformdirs import user_config_dir

from sidediff import config

def _prefs_path() -> Path:
    cfg_dir = Path(user_config_dir(appname=config.APP_NAME, appauthor=config.APP_AUTHOR))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / "prefs.json"

def load_prefs() -> dict:
    p = _prefs_path()
    if p.exists():
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except Exception:
            return {}
        return data if isinstance(data, dict) else {}
    return {}

def save_prefs(data: dict) -> None:
    p = _prefs_path()
    try:
        p.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except Exception:
        pass

def compare_options(prefs: dict | None = None) -> dict:
    """Comparison switches remembered between sessions, with config defaults."""
    prefs = load_prefs() if prefs is None else prefs
    return {
        "ignore_ws": bool(prefs.get("ignore_ws", config.DEFAULT_IGNORE_WS)),
        "ignore_case": bool(prefs.get("ignore_case", config.DEFAULT_IGNORE_CASE)),
        "normalize_eol": bool(prefs.get("normalize_eol", config.DEFAULT_NORMALIZE_EOL)),
        "inline": bool(prefs.get("inline", config.DEFAULT_INLINE)),
    }
