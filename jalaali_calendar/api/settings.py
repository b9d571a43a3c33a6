"""Configuration for the date-level conversion helpers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - handled via fallback store
    frappe = None  # type: ignore

__all__ = [
    "DEFAULT_VALIDATION_MODE",
    "VALID_MODES",
    "ValidationSetting",
    "get_settings_context",
    "get_validation_mode",
    "is_strict",
    "resolve_validation_mode",
    "set_validation_mode",
]

logger = logging.getLogger(__name__)

SettingSource = Literal["default", "system"]

# "permissive" hands out-of-range Gregorian months and days to the formula
# unchanged, "strict" rejects them before conversion.
DEFAULT_VALIDATION_MODE = "permissive"
VALID_MODES = {"permissive", "strict"}
_SETTING_KEY = "jalaali_calendar_validation"


@dataclass(frozen=True)
class ValidationSetting:
    """Resolved validation mode and where it came from."""

    value: str
    source: SettingSource


_FALLBACK_STORE: Dict[str, Optional[str]] = {"system": None}


def _normalize_mode(value: Optional[str]) -> Optional[str]:
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in VALID_MODES:
            return normalized
    return None


def _require_mode(value: Optional[str]) -> str:
    normalized = _normalize_mode(value)
    if not normalized:
        raise ValueError(
            "validation mode must be one of: {}".format(", ".join(sorted(VALID_MODES)))
        )
    return normalized


def _read_system_value() -> Optional[str]:
    if frappe:
        stored = frappe.db.get_default(_SETTING_KEY)  # type: ignore[attr-defined]
        return _normalize_mode(stored)
    return _FALLBACK_STORE["system"]


def _write_system_value(mode: str) -> None:
    if frappe:
        frappe.db.set_default(_SETTING_KEY, mode)  # type: ignore[attr-defined]
        if hasattr(frappe, "clear_cache"):
            frappe.clear_cache()
        return
    _FALLBACK_STORE["system"] = mode


def get_validation_mode(*, raw: bool = False) -> str:
    """Return the configured validation mode."""

    stored = _read_system_value()
    if raw:
        return stored or ""
    return stored or DEFAULT_VALIDATION_MODE


def set_validation_mode(mode: str) -> ValidationSetting:
    """Persist the system-wide validation mode."""

    selected = _require_mode(mode)
    _write_system_value(selected)
    logger.info("Gregorian validation mode set to %s", selected)
    return resolve_validation_mode()


def resolve_validation_mode() -> ValidationSetting:
    stored = get_validation_mode(raw=True)
    if stored:
        return ValidationSetting(stored, "system")
    return ValidationSetting(DEFAULT_VALIDATION_MODE, "default")


def is_strict() -> bool:
    """Return ``True`` if Gregorian input must be range checked."""

    return resolve_validation_mode().value == "strict"


def get_settings_context() -> Dict[str, object]:
    """Return a serialisable representation of the resolved settings."""

    resolved = resolve_validation_mode()
    return {
        "validation_mode": resolved.value,
        "source": resolved.source,
        "is_strict": resolved.value == "strict",
    }
