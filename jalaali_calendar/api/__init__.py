"""Server-side helpers exposed by the Jalaali calendar package."""

from . import converter, settings

__all__ = [
    "converter",
    "settings",
]
