# services/spoonacular.py
"""
Client for the Spoonacular meal-plan generator
(`GET /mealplanner/generate`).

One request per run, no retries.  `fetch()` raises `ApiError`;
`request_meal_plan()` turns that into `None` so the renderer can abort.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests
from pydantic import ValidationError

from core.exceptions import ApiError
from core.models.plan import DayPlan, MealPlanResult
from core.models.preferences import PreferenceRecord

_LOG = logging.getLogger(__name__)

# key used when the API answers a `timeFrame=day` request with a bare day
SINGLE_DAY_KEY = "today"


# ───────────── Config ─────────────
@dataclass(frozen=True)
class MealPlanApiConfig:
    base_url: str
    api_key: str
    timeout: float = 15.0

    @classmethod
    def from_settings(cls, settings) -> "MealPlanApiConfig":
        return cls(
            base_url=settings.spoonacular_base_url,
            api_key=settings.spoonacular_api_key,
            timeout=settings.request_timeout,
        )


def _plain_number(value: int | float) -> int | float:
    # 2000.0 → 2000 so the query string reads targetCalories=2000
    return int(value) if float(value).is_integer() else value


# ───────────── Response parsing ─────────────
def parse_meal_plan(payload: Any) -> MealPlanResult:
    """Map a decoded JSON body onto `MealPlanResult`.

    Accepts the week shape `{"week": {day: {...}}}` and the single-day
    shape `{"meals": [...], "nutrients": {...}}`.
    """
    if not isinstance(payload, dict):
        raise ApiError(f"Unexpected response body type: {type(payload).__name__}")

    if isinstance(payload.get("week"), dict):
        raw_days = payload["week"]
    elif isinstance(payload.get("meals"), list):
        raw_days = {SINGLE_DAY_KEY: payload}
    else:
        raise ApiError(
            "Response has no day-plan structure",
            details={"keys": sorted(payload)},
        )

    days: Dict[str, DayPlan] = {}
    for day, body in raw_days.items():
        try:
            days[str(day)] = DayPlan.model_validate(body)
        except ValidationError as exc:
            raise ApiError(
                f"Malformed plan for {day!r}",
                details={"day": day, "errors": exc.errors(include_url=False)},
            ) from exc
    return MealPlanResult(days=days)


# ───────────── Client ─────────────
class MealPlanClient:
    def __init__(
        self,
        config: MealPlanApiConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()

    def build_params(self, prefs: PreferenceRecord) -> Dict[str, str]:
        return {
            "timeFrame": prefs.time_frame,
            "targetCalories": str(_plain_number(prefs.calorie_goal)),
            "diet": prefs.diet,
            "exclude": ",".join(prefs.excluded_ingredients),
            "apiKey": self._config.api_key,
        }

    def build_url(self, prefs: PreferenceRecord) -> str:
        """The exact GET URL, percent-encoded."""
        req = requests.Request("GET", self._config.base_url, params=self.build_params(prefs))
        return req.prepare().url

    def fetch(self, prefs: PreferenceRecord) -> MealPlanResult:
        params = self.build_params(prefs)
        shown = {k: v for k, v in params.items() if k != "apiKey"}
        _LOG.info("Requesting meal plan: %s", shown)

        try:
            resp = self._session.get(
                self._config.base_url,
                params=params,
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            raise ApiError(f"Request failed: {exc.__class__.__name__}") from exc

        if not 200 <= resp.status_code < 300:
            raise ApiError(
                f"API answered HTTP {resp.status_code}",
                details={"body": resp.text[:500]},
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ApiError("Response body is not valid JSON") from exc

        plan = parse_meal_plan(payload)
        _LOG.debug("Received plan for days: %s", list(plan.days))
        return plan

    def request_meal_plan(self, prefs: PreferenceRecord) -> MealPlanResult | None:
        """`fetch()` but failures are logged and become `None`."""
        try:
            return self.fetch(prefs)
        except ApiError as exc:
            _LOG.error("Meal plan request failed: %s", exc)
            return None
