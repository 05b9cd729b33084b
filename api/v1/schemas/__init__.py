"""Re-export individual schema modules for easy imports."""

from .plan import PlanRunOut, PreferencesOut

__all__ = [
    "PlanRunOut",
    "PreferencesOut",
]
