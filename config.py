"""
Centralised settings loader.

Every value can be overridden from the environment or a local `.env`
file, e.g. `SPOONACULAR_API_KEY=... WORKBOOK_PATH=plans.xlsx`.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        validation_alias="LOG_FORMAT",
    )

    # ─── meal-planning API ───────────────────────────────────────────
    spoonacular_api_key: str = Field("dummy", validation_alias="SPOONACULAR_API_KEY")
    spoonacular_base_url: str = Field(
        "https://api.spoonacular.com/mealplanner/generate",
        validation_alias="SPOONACULAR_BASE_URL",
    )
    request_timeout: float = Field(15.0, gt=0, validation_alias="REQUEST_TIMEOUT")

    # ─── workbook ────────────────────────────────────────────────────
    workbook_path: str = Field("meal_plan.xlsx", validation_alias="WORKBOOK_PATH")
    preferences_sheet: str = Field("Preferences", validation_alias="PREFERENCES_SHEET")
    plan_sheet: str = Field("Meal Plan", validation_alias="PLAN_SHEET")

    # ─── rendering ───────────────────────────────────────────────────
    sort_days: bool = Field(True, validation_alias="SORT_DAYS")          # Monday → Sunday
    include_nutrients: bool = Field(True, validation_alias="INCLUDE_NUTRIENTS")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


Settings = _Settings


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
