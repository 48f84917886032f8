from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from app.analysis.reference_data import DEFAULT_REFERENCE, GENERAL_INDUSTRY, ReferenceData
from app.core.config import settings

_REFERENCE_CACHE: ReferenceData | None = None


def load_reference_file(path: str | Path) -> ReferenceData:
    """Build reference tables from a YAML file with `industry_keywords` and `action_verbs`."""
    config_path = Path(path)
    if not config_path.exists():
        raise RuntimeError(f"Reference data not found at '{config_path}'.")

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read reference data '{config_path}': {exc}") from exc

    try:
        parsed: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in reference data '{config_path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid reference data '{config_path}': expected a top-level mapping.")

    keywords = parsed.get("industry_keywords", DEFAULT_REFERENCE.industry_keywords)
    verbs = parsed.get("action_verbs", DEFAULT_REFERENCE.action_verbs)
    if not isinstance(keywords, Mapping) or not all(isinstance(items, list | tuple) for items in keywords.values()):
        raise RuntimeError(
            f"Invalid reference data '{config_path}': 'industry_keywords' must map industries to lists."
        )
    if not isinstance(verbs, list | tuple):
        raise RuntimeError(f"Invalid reference data '{config_path}': 'action_verbs' must be a list.")

    try:
        return ReferenceData.build(keywords, verbs)
    except ValueError as exc:
        raise RuntimeError(
            f"Invalid reference data '{config_path}': missing '{GENERAL_INDUSTRY}' keywords."
        ) from exc


def get_reference_data() -> ReferenceData:
    """Return the process-wide reference tables, loading the configured override once."""
    global _REFERENCE_CACHE

    if _REFERENCE_CACHE is not None:
        return _REFERENCE_CACHE

    if settings.reference_data_path:
        _REFERENCE_CACHE = load_reference_file(settings.reference_data_path)
    else:
        _REFERENCE_CACHE = DEFAULT_REFERENCE
    return _REFERENCE_CACHE
