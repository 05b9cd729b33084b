# tests/test_plan_renderer.py
from __future__ import annotations

import pytest

from conftest import FakeSheet, day, meal
from core.models.plan import MealPlanResult
from core.models.preferences import PreferenceRecord
from core.models.sheet import COLUMNS
from core.plan_renderer import (
    day_label,
    hyperlink,
    layout_rows,
    order_days,
    render_meal_plan,
)


def _plan(week: dict) -> MealPlanResult:
    return MealPlanResult.model_validate({"days": week})


def _body(layout):
    """Rows after the header."""
    return layout.rows[layout.header_row:]


# ── helpers ─────────────────────────────────────────────────────────
def test_day_label_capitalises_first_letter_only():
    assert day_label("wednesday") == "Wednesday"
    assert day_label("day 1 (light)") == "Day 1 (light)"
    assert day_label("mONDAY") == "MONDAY"
    assert day_label("") == ""


def test_hyperlink_formula():
    assert hyperlink("https://example.com/a") == '=HYPERLINK("https://example.com/a","View Recipe")'
    assert hyperlink('https://x.com/"q"') == '=HYPERLINK("https://x.com/""q""","View Recipe")'
    assert hyperlink("") is None


def test_order_days_monday_first_unknown_last():
    keys = ["sunday", "extra", "Monday", "wednesday", "bonus"]
    assert order_days(keys) == ["Monday", "wednesday", "sunday", "extra", "bonus"]


# ── layout ──────────────────────────────────────────────────────────
def test_header_and_summary(prefs, week_payload):
    layout = layout_rows(prefs, _plan(week_payload["week"]))

    assert layout.rows[layout.title_row - 1][0] == "Weekly Meal Plan"
    assert tuple(layout.rows[layout.header_row - 1]) == COLUMNS
    summary = {layout.rows[r - 1][0]: layout.rows[r - 1][1] for r in layout.summary_rows}
    assert summary["Calorie Goal"] == 2000
    assert summary["Diet"] == "vegetarian"
    assert summary["Excluded Ingredients"] == "shellfish"


def test_daily_title_and_empty_summary_values():
    p = PreferenceRecord(calorie_goal=1600, number_of_days=1)
    layout = layout_rows(p, _plan({"today": day(meal("Soup", "https://e.com/s"))}))
    assert layout.title == "Daily Meal Plan"
    summary = {layout.rows[r - 1][0]: layout.rows[r - 1][1] for r in layout.summary_rows}
    assert summary["Diet"] == "None"
    assert summary["Excluded Ingredients"] == "None"


def test_three_meal_day_advances_four_rows(prefs):
    plan = _plan({
        "monday": day(
            meal("A", "https://e.com/a"),
            meal("B", "https://e.com/b"),
            meal("C", "https://e.com/c"),
        )
    })
    layout = layout_rows(prefs, plan)
    body = _body(layout)

    assert len(body) == 4
    assert [r[1] for r in body[:3]] == ["A", "B", "C"]
    assert body[3] == [None] * len(COLUMNS)
    assert layout.next_row == layout.header_row + 5


def test_day_label_only_on_first_meal_row(prefs, week_payload):
    body = _body(layout_rows(prefs, _plan(week_payload["week"])))

    assert body[0][0] == "Monday"
    assert body[1][0] is None
    assert body[2] == [None] * len(COLUMNS)
    assert body[3][0] == "Tuesday"


def test_nutrients_once_per_day(prefs, week_payload):
    body = _body(layout_rows(prefs, _plan(week_payload["week"])))
    assert body[0][3:] == [1998.5, 70.2, 80.1, 250.4]
    assert body[1][3:] == [None, None, None, None]


def test_nutrients_can_be_left_blank(prefs, week_payload):
    body = _body(layout_rows(prefs, _plan(week_payload["week"]), include_nutrients=False))
    assert all(r[3:] == [None] * 4 for r in body)


def test_response_order_kept_when_not_sorting(prefs, week_payload):
    layout = layout_rows(prefs, _plan(week_payload["week"]), sort_days=False)
    labels = [layout.rows[r - 1][0] for r in layout.day_rows]
    assert labels == ["Tuesday", "Monday"]


def test_full_week_row_count(prefs):
    days = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
    week = {
        d: day(*(meal(f"{d}-{i}", f"https://e.com/{d}/{i}") for i in range(3)))
        for d in days
    }
    layout = layout_rows(prefs, _plan(week))
    assert layout.days_rendered == 7
    assert len(_body(layout)) == 7 * 4


# ── render guard ────────────────────────────────────────────────────
@pytest.mark.parametrize("plan", [None, MealPlanResult(), _plan({})])
def test_invalid_plan_leaves_sheet_alone(prefs, plan):
    sheet = FakeSheet()
    outcome = render_meal_plan(prefs, plan, sheet)

    assert not outcome.ok
    assert outcome.message == "invalid plan data"
    assert sheet.replaced == 0


def test_render_writes_once(prefs, week_payload):
    sheet = FakeSheet()
    outcome = render_meal_plan(prefs, _plan(week_payload["week"]), sheet)

    assert outcome.ok
    assert sheet.replaced == 1
    assert outcome.days_rendered == 2
    assert outcome.rows_written == len(sheet.layout.rows)


def test_day_without_meals_keeps_its_row(prefs):
    plan = _plan({
        "monday": day(calories=0, fat=0, protein=0, carbs=0),
        "tuesday": day(meal("A", "https://e.com/a")),
    })
    layout = layout_rows(prefs, plan)
    body = _body(layout)

    labels = [layout.rows[r - 1][0] for r in layout.day_rows]
    assert labels == ["Monday", "Tuesday"]
    assert body[0] == ["Monday", None, None, 0, 0, 0, 0]
    assert body[1] == [None] * len(COLUMNS)
    assert body[2][:2] == ["Tuesday", "A"]
    assert len(body) == 4
