"""Load and expose table column sets from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import DISPLAY_ORDER_EXPORT, DISPLAY_ORDER_TABLE

logger = logging.getLogger(__name__)

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "table": list(DISPLAY_ORDER_TABLE),
        "export": list(DISPLAY_ORDER_EXPORT),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False) -> dict[str, list[str]]:
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _defaults()
    if not yaml_path.exists():
        _CACHE = sets
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable column config %s: %s", yaml_path, exc)
        _CACHE = sets
        return _CACHE
    configured = data.get("sets", {}) if isinstance(data, dict) else {}
    for name in sets:
        value = configured.get(name)
        if isinstance(value, list) and value:
            sets[name] = [str(col) for col in value]
    _CACHE = sets
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
