"""
core/preference_reader.py
────────────────────────────────────────────────────────────────────────
Turn the "Preferences" tab into a `PreferenceRecord`.

The tab is a one-row configuration table:

    | Calorie Goal | Diet       | Exclude Ingredients | Number of Days |
    | 2000         | vegetarian | shellfish, olives   | 7              |

Labels are matched case- and whitespace-insensitively; only the first
data row is read.
"""

from __future__ import annotations

import logging
import math
from typing import Dict

import pandas as pd
from pydantic import ValidationError

from core.exceptions import ConfigurationError
from core.models.preferences import PreferenceRecord, split_ingredients
from services.workbook import read_sheet

_LOG = logging.getLogger(__name__)

# normalised label → record field
LABELS: Dict[str, str] = {
    "calorie goal": "calorie_goal",
    "diet": "diet",
    "exclude ingredients": "excluded_ingredients",
    "excluded ingredients": "excluded_ingredients",
    "number of days": "number_of_days",
}
REQUIRED_FIELDS = ("calorie_goal", "diet", "excluded_ingredients", "number_of_days")


def _normalise_label(label) -> str:
    return " ".join(str(label).split()).lower()


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value)) or (
        isinstance(value, str) and not value.strip()
    )


def _number(value, field: str) -> int | float:
    num = pd.to_numeric(pd.Series([value]), errors="coerce").iloc[0]
    if pd.isna(num):
        raise ConfigurationError(
            f"'{field}' must be numeric, got {value!r}", details={"field": field}
        )
    num = float(num)
    if not math.isfinite(num):
        raise ConfigurationError(
            f"'{field}' must be finite, got {value!r}", details={"field": field}
        )
    return int(num) if num.is_integer() else num


def read_preferences(frame: pd.DataFrame) -> PreferenceRecord:
    """Map the first data row of `frame` onto a `PreferenceRecord`."""
    columns = {}
    for col in frame.columns:
        field = LABELS.get(_normalise_label(col))
        if field and field not in columns:
            columns[field] = col

    missing = [f for f in REQUIRED_FIELDS if f not in columns]
    if missing:
        raise ConfigurationError(
            f"Preferences tab is missing columns: {missing}",
            details={"missing": missing},
        )
    if frame.empty:
        raise ConfigurationError("Preferences tab has no data row")

    row = frame.iloc[0]
    raw = {field: row[col] for field, col in columns.items()}

    for field in ("calorie_goal", "number_of_days"):
        if _is_blank(raw[field]):
            raise ConfigurationError(f"'{field}' is empty", details={"field": field})

    days = _number(raw["number_of_days"], "number_of_days")
    if not isinstance(days, int):
        raise ConfigurationError(
            f"'number_of_days' must be a whole number, got {days!r}",
            details={"field": "number_of_days"},
        )

    diet = "" if _is_blank(raw["diet"]) else str(raw["diet"])
    exclusions = "" if _is_blank(raw["excluded_ingredients"]) else str(raw["excluded_ingredients"])

    try:
        prefs = PreferenceRecord(
            calorie_goal=_number(raw["calorie_goal"], "calorie_goal"),
            diet=diet,
            excluded_ingredients=split_ingredients(exclusions),
            number_of_days=days,
        )
    except ValidationError as exc:
        fields = sorted({str(e["loc"][0]) for e in exc.errors() if e.get("loc")})
        raise ConfigurationError(
            f"Invalid preference values: {fields}", details={"fields": fields}
        ) from exc

    _LOG.info(
        "Preferences: %s kcal, diet=%r, exclude=%s, days=%d (%s)",
        prefs.calorie_goal,
        prefs.diet,
        list(prefs.excluded_ingredients),
        prefs.number_of_days,
        prefs.time_frame,
    )
    return prefs


def load_preferences(path: str, sheet_name: str) -> PreferenceRecord:
    """Read the preferences tab of the workbook at `path`."""
    return read_preferences(read_sheet(path, sheet_name))
