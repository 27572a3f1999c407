"""Status/quality normalization and score reconciliation."""

import json
from collections.abc import Mapping
from typing import Any, Optional

from src.models.quality import QualityChecklist

NO_TEXT = "(no text)"

# Raw flags that mean "problem detected"; the checklist outcome is their negation.
_INVERTED_CHECKS = {
    "photos_divisions": "photos_divisions_ok",
    "duplicates": "no_duplicates_ok",
}

_STANDARD_CHECKS = ("photo_quality", "location_ok", "description_ok", "base_info_ok")


def normalize_quality(value: Optional[str]) -> str:
    """Canonical status/quality token: trimmed and lower-cased, None becomes ""."""
    return (value or "").strip().lower()


def _coerce_score(raw: Any) -> Optional[Mapping]:
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return None
    if isinstance(raw, Mapping):
        return raw
    return None


def reconcile_score(raw: Any) -> QualityChecklist:
    """
    Convert a raw score object into the six-entry quality checklist.
    
    ``photos_divisions`` and ``duplicates`` are inverted: a missing or false
    flag passes. The remaining checks pass only on a literal ``True``. A
    missing score object fails every check.
    """
    score = _coerce_score(raw)
    if score is None:
        return QualityChecklist()

    outcomes = {name: not score.get(key) for key, name in _INVERTED_CHECKS.items()}
    outcomes.update({key: score.get(key) is True for key in _STANDARD_CHECKS})
    return QualityChecklist(has_data=True, **outcomes)


def status_variant(status: Optional[str]) -> str:
    """Badge variant for a workflow status."""
    status = normalize_quality(status)
    if status == "pending":
        return "pending"
    if status in ("done", "ok"):
        return "ok"
    if status == "review":
        return "review"
    return "unknown"


def quality_variant(quality: Optional[str]) -> str:
    """Badge variant for a quality label."""
    quality = normalize_quality(quality)
    if quality in ("ok", "review"):
        return quality
    return "unknown"


def quality_display_text(quality: Optional[str]) -> str:
    quality = normalize_quality(quality)
    if quality == "ok":
        return "OK"
    if quality == "review":
        return "Review"
    return quality


def display_status(status: Optional[str]) -> str:
    """Dashboard status token; reviewed listings show as ok."""
    status = normalize_quality(status)
    return "ok" if status == "done" else status


def clean_description(description: Optional[str]) -> str:
    """
    Human-readable description.
    
    Some import sources store a serialized object instead of plain text; in
    that case the ``text``, ``name`` or ``description`` key is shown.
    """
    desc = (description or "").strip()
    if not desc:
        return NO_TEXT
    if not desc.startswith("{"):
        return desc

    try:
        obj = json.loads(desc)
    except ValueError:
        return NO_TEXT
    if not isinstance(obj, dict):
        return NO_TEXT

    for key in ("text", "name", "description"):
        if obj.get(key) is not None:
            return str(obj[key])
    return NO_TEXT
