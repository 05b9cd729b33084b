from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class NutrientSummary(BaseModel):
    calories: float = 0
    fat: float = 0             # grams
    protein: float = 0         # grams
    carbohydrates: float = 0   # grams

    model_config = ConfigDict(extra="ignore")


class Meal(BaseModel):
    title: str
    source_url: str = Field("", alias="sourceUrl")
    id: int | None = None
    ready_in_minutes: int | None = Field(None, alias="readyInMinutes")
    servings: int | None = None
    nutrients: NutrientSummary | None = None   # per-meal breakdown, not rendered

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DayPlan(BaseModel):
    meals: List[Meal] = []
    nutrients: NutrientSummary = NutrientSummary()

    model_config = ConfigDict(extra="ignore")


class MealPlanResult(BaseModel):
    """Day key (as sent by the API, e.g. "monday") → that day's plan.

    Key order is the order the response listed them in.
    """

    days: Dict[str, DayPlan] = {}

    @property
    def is_empty(self) -> bool:
        return not self.days
