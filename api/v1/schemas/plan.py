from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, Field


class PreferencesOut(BaseModel):
    calorie_goal: float
    diet: str = Field("", examples=["vegetarian", "ketogenic", ""])
    excluded_ingredients: List[str] = []
    number_of_days: int
    time_frame: Literal["day", "week"]


class PlanRunOut(BaseModel):
    status: Literal["written"]
    message: str
    workbook: str
    sheet: str
    days_rendered: int
    rows_written: int
