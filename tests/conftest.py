"""
Shared fakes: a canned `requests` session, an in-memory output tab and
a helper that writes a real preferences workbook.
"""
from __future__ import annotations

import json

import pytest
import requests
from openpyxl import Workbook

from core.models.preferences import PreferenceRecord
from services.spoonacular import MealPlanApiConfig, MealPlanClient

BASE_URL = "https://api.spoonacular.com/mealplanner/generate"
API_KEY = "test-key"


def meal(title: str, url: str, meal_id: int = 1) -> dict:
    return {
        "id": meal_id,
        "imageType": "jpg",
        "title": title,
        "readyInMinutes": 30,
        "servings": 2,
        "sourceUrl": url,
    }


def day(*meals: dict, calories=1998.5, fat=70.2, protein=80.1, carbs=250.4) -> dict:
    return {
        "meals": list(meals),
        "nutrients": {
            "calories": calories,
            "fat": fat,
            "protein": protein,
            "carbohydrates": carbs,
        },
    }


def make_response(body, status_code: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = (body if isinstance(body, str) else json.dumps(body)).encode()
    resp.url = BASE_URL
    return resp


class FakeSession:
    """Stands in for `requests.Session`; records every GET."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


class FakeSheet:
    """Output tab double; `replace()` keeps the last layout it was given."""

    def __init__(self):
        self.layout = None
        self.replaced = 0

    def replace(self, layout):
        self.layout = layout
        self.replaced += 1


def make_client(session: FakeSession) -> MealPlanClient:
    return MealPlanClient(MealPlanApiConfig(BASE_URL, API_KEY, timeout=5), session=session)


def write_preferences(path, values, sheet="Preferences", labels=None) -> str:
    labels = labels or ["Calorie Goal", "Diet", "Exclude Ingredients", "Number of Days"]
    wb = Workbook()
    ws = wb.active
    ws.title = sheet
    ws.append(labels)
    if values is not None:
        ws.append(values)
    wb.save(path)
    return str(path)


@pytest.fixture
def prefs() -> PreferenceRecord:
    return PreferenceRecord(
        calorie_goal=2000,
        diet="vegetarian",
        excluded_ingredients=["shellfish"],
        number_of_days=7,
    )


@pytest.fixture
def week_payload() -> dict:
    return {
        "week": {
            "tuesday": day(meal("Lentil Soup", "https://example.com/lentil", 3)),
            "monday": day(
                meal("Overnight Oats", "https://example.com/oats", 1),
                meal("Veggie Chili", "https://example.com/chili", 2),
            ),
        }
    }
