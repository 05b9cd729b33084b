"""
core/pipeline.py
────────────────────────────────────────────────────────────────────────
read preferences → request plan → render, each exactly once.

The preference record and plan result are passed along explicitly;
nothing downstream re-reads the workbook.
"""
from __future__ import annotations

import logging

from core.plan_renderer import RenderOutcome, render_meal_plan
from core.preference_reader import load_preferences
from services.spoonacular import MealPlanApiConfig, MealPlanClient
from services.workbook import WorkbookSheet

_LOG = logging.getLogger(__name__)


def generate_meal_plan(
    settings,
    *,
    client: MealPlanClient | None = None,
    sheet=None,
) -> RenderOutcome:
    """Run one generation against `settings.workbook_path`.

    Raises `ConfigurationError` if the preferences tab is unusable; API and
    render failures come back as a failed `RenderOutcome`.
    """
    prefs = load_preferences(settings.workbook_path, settings.preferences_sheet)

    client = client or MealPlanClient(MealPlanApiConfig.from_settings(settings))
    plan = client.request_meal_plan(prefs)

    sheet = sheet or WorkbookSheet(settings.workbook_path, settings.plan_sheet)
    outcome = render_meal_plan(
        prefs,
        plan,
        sheet,
        sort_days=settings.sort_days,
        include_nutrients=settings.include_nutrients,
    )
    if not outcome.ok:
        _LOG.warning("Meal plan not written: %s", outcome.message)
    return outcome
