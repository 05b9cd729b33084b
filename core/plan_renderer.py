"""
core/plan_renderer.py
────────────────────────────────────────────────────────────────────────
Lay a `MealPlanResult` out as sheet rows and hand them to the output tab.

Layout
------
    Weekly Meal Plan
    (blank)
    Calorie Goal          2000
    Diet                  vegetarian
    Excluded Ingredients  shellfish
    Number of Days        7
    (blank)
    Day | Meal | Recipe Link | Calories | Fat | Protein | Carbohydrates
    Monday | <meal 1> | View Recipe | <day totals …>
           | <meal 2> | View Recipe |
    (blank separator)
    Tuesday | …

The whole tab is staged in memory first and written with one
`sheet.replace(layout)` call; an invalid plan never reaches the sheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from core.exceptions import RenderGuardError
from core.models.plan import DayPlan, Meal, MealPlanResult
from core.models.preferences import PreferenceRecord
from core.models.sheet import COLUMNS, SheetLayout

_LOG = logging.getLogger(__name__)

DAY_ORDER = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
LINK_LABEL = "View Recipe"
TITLES = {"week": "Weekly Meal Plan", "day": "Daily Meal Plan"}


@dataclass(frozen=True)
class RenderOutcome:
    ok: bool
    message: str
    days_rendered: int = 0
    rows_written: int = 0


# ─────────────────────────────── helpers ───────────────────────────── #
def day_label(key: str) -> str:
    """'wednesday' → 'Wednesday'; only the first character changes."""
    return key[:1].upper() + key[1:]


def hyperlink(url: str, label: str = LINK_LABEL) -> str | None:
    if not url:
        return None
    esc = url.replace('"', '""')
    return f'=HYPERLINK("{esc}","{label}")'


def order_days(keys: Iterable[str]) -> List[str]:
    """Monday → Sunday; unrecognised keys keep their order, after the week."""
    keys = list(keys)
    rank = {d: i for i, d in enumerate(DAY_ORDER)}
    return sorted(
        keys,
        key=lambda k: (rank.get(k.strip().lower(), len(DAY_ORDER)), keys.index(k)),
    )


def _meal_row(label: str | None, meal: Meal | None, day: DayPlan | None) -> list:
    row = [label, None, None] if meal is None else [label, meal.title, hyperlink(meal.source_url)]
    if day is not None:
        n = day.nutrients
        row += [n.calories, n.fat, n.protein, n.carbohydrates]
    return row


# ─────────────────────────────── layout ────────────────────────────── #
def layout_rows(
    prefs: PreferenceRecord,
    plan: MealPlanResult,
    *,
    sort_days: bool = True,
    include_nutrients: bool = True,
) -> SheetLayout:
    layout = SheetLayout(title=TITLES[prefs.time_frame])

    layout.title_row = layout.append(layout.title)
    layout.blank()

    summary = (
        ("Calorie Goal", prefs.calorie_goal),
        ("Diet", prefs.diet or "None"),
        ("Excluded Ingredients", ", ".join(prefs.excluded_ingredients) or "None"),
        ("Number of Days", prefs.number_of_days),
    )
    for label, value in summary:
        layout.summary_rows.append(layout.append(label, value))
    layout.blank()

    layout.header_row = layout.append(*COLUMNS)

    keys = order_days(plan.days) if sort_days else list(plan.days)
    for key in keys:
        day = plan.days[key]
        # a day with no meals still gets its labelled row
        for i, meal in enumerate(day.meals or [None]):
            first = i == 0
            row_no = layout.append(
                *_meal_row(
                    day_label(key) if first else None,
                    meal,
                    day if first and include_nutrients else None,
                )
            )
            if first:
                layout.day_rows.append(row_no)
        layout.blank()  # separator after every day block
        layout.days_rendered += 1

    return layout


# ─────────────────────────────── render ────────────────────────────── #
def render_meal_plan(
    prefs: PreferenceRecord,
    plan: MealPlanResult | None,
    sheet,
    *,
    sort_days: bool = True,
    include_nutrients: bool = True,
) -> RenderOutcome:
    """Overwrite `sheet` (anything with a `replace(layout)` method) with the plan.

    Returns a failed outcome, leaving the sheet untouched, when the plan
    is missing or has no days.
    """
    if plan is None or plan.is_empty:
        err = RenderGuardError(
            "invalid plan data",
            details={"reason": "no plan" if plan is None else "no days"},
        )
        _LOG.error("Render aborted: %s (%s)", err, err.details["reason"])
        return RenderOutcome(ok=False, message=err.message)

    layout = layout_rows(
        prefs, plan, sort_days=sort_days, include_nutrients=include_nutrients
    )
    sheet.replace(layout)

    _LOG.info("Rendered %d day(s), %d rows", layout.days_rendered, len(layout.rows))
    return RenderOutcome(
        ok=True,
        message="meal plan written",
        days_rendered=layout.days_rendered,
        rows_written=len(layout.rows),
    )
