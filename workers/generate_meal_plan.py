"""
`python -m workers.generate_meal_plan --workbook plans.xlsx`

Reads the Preferences tab, asks Spoonacular for a plan and rewrites the
Meal Plan tab.  Exit status: 0 written, 1 aborted, 2 bad preferences.
"""
from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from config import settings  # noqa: E402
from core.exceptions import ConfigurationError  # noqa: E402
from core.pipeline import generate_meal_plan  # noqa: E402

_LOG = logging.getLogger("workers.generate_meal_plan")


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate a meal plan into a workbook")
    ap.add_argument("--workbook", help=f"xlsx path (default: {settings.workbook_path})")
    ap.add_argument("--preferences-sheet", help="tab holding the preferences row")
    ap.add_argument("--plan-sheet", help="tab to overwrite with the plan")
    ap.add_argument(
        "--keep-order",
        action="store_true",
        help="keep the API's day order instead of Monday → Sunday",
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    overrides = {}
    if args.workbook:
        overrides["workbook_path"] = args.workbook
    if args.preferences_sheet:
        overrides["preferences_sheet"] = args.preferences_sheet
    if args.plan_sheet:
        overrides["plan_sheet"] = args.plan_sheet
    if args.keep_order:
        overrides["sort_days"] = False
    run_settings = settings.model_copy(update=overrides)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else run_settings.log_level,
        format=run_settings.log_format,
    )

    try:
        outcome = generate_meal_plan(run_settings)
    except ConfigurationError as exc:
        _LOG.error("Bad preferences: %s", exc)
        return 2

    if not outcome.ok:
        return 1
    _LOG.info("%s: %d day(s) → %s", outcome.message, outcome.days_rendered, run_settings.plan_sheet)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
