from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# a request for 7+ days asks the API for a whole week, anything less for one day
WEEK_THRESHOLD = 7

TimeFrame = Literal["day", "week"]


def split_ingredients(raw: str | None) -> list[str]:
    """'egg, milk ,nuts' -> ['egg', 'milk', 'nuts']; blanks are dropped."""
    if not raw:
        return []
    return [tok.strip() for tok in str(raw).split(",") if tok.strip()]


class PreferenceRecord(BaseModel):
    calorie_goal: int | float
    diet: str = ""
    excluded_ingredients: tuple[str, ...] = ()
    number_of_days: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("calorie_goal")
    @classmethod
    def _positive_calories(cls, v):
        if not math.isfinite(v) or v <= 0:
            raise ValueError("calorie goal must be a positive finite number")
        return v

    @field_validator("diet", mode="before")
    @classmethod
    def _strip_diet(cls, v):
        return "" if v is None else str(v).strip()

    @field_validator("excluded_ingredients", mode="before")
    @classmethod
    def _clean_exclusions(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(split_ingredients(v))
        return tuple(s.strip() for s in v if s and str(s).strip())

    @property
    def time_frame(self) -> TimeFrame:
        return "week" if self.number_of_days >= WEEK_THRESHOLD else "day"
