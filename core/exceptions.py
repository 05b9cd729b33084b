"""
core/exceptions.py
────────────────────────────────────────────────────────────────────────
Error kinds raised along the read → request → render pipeline.

* ConfigurationError – the preferences tab is missing fields or holds
  non-numeric values where numbers are expected.
* ApiError           – network / HTTP / JSON failure talking to the
  meal-planning API.  Swallowed by the client into a `None` result.
* RenderGuardError   – the renderer was handed an empty or invalid plan;
  nothing is written.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class MealPlanError(Exception):
    """Base class; carries a human-readable message plus optional details."""

    def __init__(self, message: str = "Meal plan error", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": type(self).__name__, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ConfigurationError(MealPlanError):
    """Raised when the preferences source is missing or malformed."""


class ApiError(MealPlanError):
    """Raised when the meal-planning API call fails.

    `status_code` is set when the server answered with a non-2xx status.
    """

    def __init__(
        self,
        message: str = "Meal-planning API request failed",
        details: Optional[Mapping[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class RenderGuardError(MealPlanError):
    """Raised (and logged) when plan data is unusable for rendering."""
