# api/v1/plans.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from config import Settings, settings
from core.exceptions import ConfigurationError
from core.pipeline import generate_meal_plan
from core.preference_reader import load_preferences
from services.spoonacular import MealPlanApiConfig, MealPlanClient
from api.v1.schemas import PlanRunOut, PreferencesOut

router = APIRouter()


# ───────────────────────── dependencies ─────────────────────
def get_settings() -> Settings:
    return settings


def get_client(cfg: Settings = Depends(get_settings)) -> MealPlanClient:
    return MealPlanClient(MealPlanApiConfig.from_settings(cfg))


# ───────────────────────── read ─────────────────────────────
@router.get(
    "/preferences",
    response_model=PreferencesOut,
    status_code=status.HTTP_200_OK,
    summary="Show the preferences the next run would use",
)
def get_preferences(cfg: Settings = Depends(get_settings)) -> PreferencesOut:
    try:
        prefs = load_preferences(cfg.workbook_path, cfg.preferences_sheet)
    except ConfigurationError as exc:
        raise HTTPException(422, exc.to_dict())

    return PreferencesOut(
        calorie_goal=prefs.calorie_goal,
        diet=prefs.diet,
        excluded_ingredients=list(prefs.excluded_ingredients),
        number_of_days=prefs.number_of_days,
        time_frame=prefs.time_frame,
    )


# ───────────────────────── run ──────────────────────────────
@router.post(
    "",
    response_model=PlanRunOut,
    status_code=status.HTTP_200_OK,
    summary="Generate a plan and rewrite the plan tab",
)
def run_plan(
    cfg: Settings = Depends(get_settings),
    client: MealPlanClient = Depends(get_client),
) -> PlanRunOut:
    try:
        outcome = generate_meal_plan(cfg, client=client)
    except ConfigurationError as exc:
        raise HTTPException(422, exc.to_dict())

    if not outcome.ok:
        # upstream API failed or returned nothing usable; sheet left as-is
        raise HTTPException(status.HTTP_502_BAD_GATEWAY, outcome.message)

    return PlanRunOut(
        status="written",
        message=outcome.message,
        workbook=cfg.workbook_path,
        sheet=cfg.plan_sheet,
        days_rendered=outcome.days_rendered,
        rows_written=outcome.rows_written,
    )
