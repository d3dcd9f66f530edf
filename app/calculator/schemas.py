# app/calculator/schemas.py

from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# -------------------------------------------------------------------
# Allowed range per input field (closed intervals).
# Both the validator and the pydantic bounds read from this table.
# -------------------------------------------------------------------
FIELD_LIMITS: Dict[str, Tuple[float, float]] = {
    "projects_per_year": (1, 10_000),
    "avg_budget_per_project": (1_000, 1_000_000_000),
    "avg_cost_overrun_pct": (0, 500),
    "avg_schedule_slip_weeks": (0, 520),
    "cost_per_week_of_delay": (0, 100_000_000),
    "prob_major_issue_pct": (0, 100),
    "avg_cost_per_major_issue": (0, 100_000_000),
    "engagement_cost": (0, 10_000_000),
}


def _bounded(name: str, description: str):
    low, high = FIELD_LIMITS[name]
    return Field(..., ge=low, le=high, description=description)


class _Frozen(BaseModel):
    # camelCase on the wire, snake_case in Python; either is accepted on input
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )


class CalculatorInput(_Frozen):
    projects_per_year: float = _bounded("projects_per_year", "Projects managed per year")
    avg_budget_per_project: float = _bounded("avg_budget_per_project", "Average budget per project")
    avg_cost_overrun_pct: float = _bounded("avg_cost_overrun_pct", "Average cost overrun (%)")
    avg_schedule_slip_weeks: float = _bounded("avg_schedule_slip_weeks", "Average schedule slip (weeks)")
    cost_per_week_of_delay: float = _bounded("cost_per_week_of_delay", "Cost per week of delay")
    prob_major_issue_pct: float = _bounded("prob_major_issue_pct", "Probability of a major issue (%)")
    avg_cost_per_major_issue: float = _bounded("avg_cost_per_major_issue", "Average cost per major issue")
    engagement_cost: float = _bounded("engagement_cost", "Engagement investment")


class WasteBreakdown(_Frozen):
    cost_overrun_waste: float
    delay_waste: float
    risk_waste: float
    total_annual_waste: float


class SavingsScenario(_Frozen):
    percentage: float
    savings: float
    net_savings: float
    roi_percent: float
    roi_multiple: float
    payback_months: float


class ScenarioSet(_Frozen):
    conservative: SavingsScenario  # 10%
    moderate: SavingsScenario      # 15%
    aggressive: SavingsScenario    # 25%


class CalculatorOutput(_Frozen):
    waste_breakdown: WasteBreakdown
    scenarios: ScenarioSet
    inputs: CalculatorInput


# --- HTTP payloads ---

class ShareTokenOut(BaseModel):
    token: str


class SharedInputsOut(BaseModel):
    inputs: CalculatorInput
    # False when the token was unusable and defaults were returned instead
    from_token: bool


class InputFieldMeta(BaseModel):
    key: str
    label: str
    tooltip: str
    prefix: str = ""
    suffix: str = ""
    step: float
    min: float
    max: float
    quick_mode: bool = True
