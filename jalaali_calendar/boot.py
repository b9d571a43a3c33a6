"""Hook implementations that integrate the Jalaali converter with Frappe."""
from __future__ import annotations

from .api import settings


def boot_session(bootinfo):
    """Inject the resolved converter settings into the boot payload."""

    context = settings.get_settings_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("jalaali_calendar", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "jalaali_calendar", context)
