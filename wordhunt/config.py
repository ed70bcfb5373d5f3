# wordhunt/config.py
from __future__ import annotations
import json, logging, os
from typing import Dict, Any, Optional

from pathlib import Path

from .letters import is_valid_word

logger = logging.getLogger(__name__)

PKG_DIR = Path(__file__).resolve().parent
CONFIG_ENV = "WORDHUNT_CONFIG"
CONFIG_PATH = os.environ.get(CONFIG_ENV) or str(PKG_DIR / "config.json")

DEFAULT_CFG: Dict[str, Any] = {
    "display": {"fullscreen": False, "fps": 60, "windowed_size": [720, 900]},
    "grid": {"initial_size": 10, "max_size": 19, "size_step": 1},
    "shuffle": {"interval_initial_ms": 10000, "interval_min_ms": 300, "interval_step_ms": 50},
    "timing": {"wrong_letter_ms": 1000, "word_found_ms": 1500, "blink_ms": 200},
    "pins": {"UP": 5, "DOWN": 6, "LEFT": 13, "RIGHT": 19, "SELECT": 26, "START": 21},
    "vocabulary": [],
    "logging": {"level": "INFO", "file": None},
}

def _deepcopy(obj):
    return json.loads(json.dumps(obj))

def _merge(dst: dict, src: dict) -> dict:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _merge(dst[k], v)
        else:
            dst[k] = v
    return dst

def _clamp_int(value, lo: int, hi: int, default: int) -> int:
    try:
        return int(max(lo, min(hi, int(value))))
    except (TypeError, ValueError):
        return default

def _sanitize_cfg(cfg: dict) -> dict:
    for section, default in DEFAULT_CFG.items():
        if isinstance(default, dict) and not isinstance(cfg.get(section), dict):
            logger.warning("Config section %r is not an object; using defaults", section)
            cfg[section] = _deepcopy(default)

    d = cfg["display"]
    d["fullscreen"] = bool(d.get("fullscreen", False))
    d["fps"] = _clamp_int(d.get("fps", 60), 30, 240, 60)
    ws = d.get("windowed_size", [720, 900])
    if isinstance(ws, (list, tuple)) and len(ws) == 2 and all(isinstance(x, (int, float)) for x in ws):
        w, h = max(200, min(10000, int(ws[0]))), max(200, min(10000, int(ws[1])))
        d["windowed_size"] = [w, h]
    else:
        d["windowed_size"] = [720, 900]

    g = cfg["grid"]
    g["initial_size"] = _clamp_int(g.get("initial_size", 10), 2, 40, 10)
    g["max_size"]     = _clamp_int(g.get("max_size", 19), g["initial_size"], 40, g["initial_size"])
    g["size_step"]    = _clamp_int(g.get("size_step", 1), 0, 10, 1)

    s = cfg["shuffle"]
    s["interval_initial_ms"] = _clamp_int(s.get("interval_initial_ms", 10000), 50, 600000, 10000)
    s["interval_min_ms"]     = _clamp_int(s.get("interval_min_ms", 300), 50, s["interval_initial_ms"], 300)
    s["interval_step_ms"]    = _clamp_int(s.get("interval_step_ms", 50), 0, 60000, 50)

    t = cfg["timing"]
    t["wrong_letter_ms"] = _clamp_int(t.get("wrong_letter_ms", 1000), 0, 60000, 1000)
    t["word_found_ms"]   = _clamp_int(t.get("word_found_ms", 1500), 0, 60000, 1500)
    t["blink_ms"]        = _clamp_int(t.get("blink_ms", 200), 0, 10000, 200)

    vocab = cfg.get("vocabulary") or []
    if not isinstance(vocab, list):
        vocab = []
    words = [w.strip().upper() for w in vocab if isinstance(w, str) and w.strip()]
    dropped = [w for w in words if not is_valid_word(w)]
    if dropped:
        logger.warning("Dropping vocabulary entries that are not A-Z words: %s", dropped)
    cfg["vocabulary"] = [w for w in words if is_valid_word(w)]

    lg = cfg["logging"]
    lg["level"] = str(lg.get("level") or "INFO").upper()
    if lg.get("file") is not None:
        lg["file"] = str(lg["file"])
    return cfg

def load_config(path: Optional[str] = None) -> dict:
    """Defaults merged with the JSON file at ``path`` (a missing file is fine)."""
    path = path or CONFIG_PATH
    cfg = _deepcopy(DEFAULT_CFG)
    try:
        with open(path, "r", encoding="utf-8") as f:
            user = json.load(f)
        if isinstance(user, dict):
            _merge(cfg, user)
        else:
            logger.warning("Ignoring config %s: top level is not an object", path)
    except FileNotFoundError:
        pass
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
    cfg = _sanitize_cfg(cfg)
    cfg["config_path"] = str(Path(path).resolve())
    return cfg

def reload_config(path: Optional[str] = None) -> dict:
    """Re-read the config into the shared ``CFG`` dict (used by ``--config``)."""
    fresh = load_config(path)
    CFG.clear()
    CFG.update(fresh)
    return CFG

CFG = load_config()
