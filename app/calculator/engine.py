# app/calculator/engine.py

import math
from typing import Optional

from .schemas import CalculatorInput, SavingsScenario, WasteBreakdown

# Display ceiling for payback; also covers the "never pays back" case.
MAX_PAYBACK_MONTHS = 999.0


# -------------------------------------------------------------------
# WASTE
# -------------------------------------------------------------------

def calculate_cost_overrun_waste(
    projects_per_year: float,
    avg_budget_per_project: float,
    avg_cost_overrun_pct: float,
) -> float:
    """projects * budget * overrun%"""
    return projects_per_year * avg_budget_per_project * (avg_cost_overrun_pct / 100)


def calculate_delay_waste(
    projects_per_year: float,
    avg_schedule_slip_weeks: float,
    cost_per_week_of_delay: float,
) -> float:
    """projects * weeks late * cost per week"""
    return projects_per_year * avg_schedule_slip_weeks * cost_per_week_of_delay


def calculate_risk_waste(
    projects_per_year: float,
    prob_major_issue_pct: float,
    avg_cost_per_major_issue: float,
) -> float:
    """projects * issue probability * cost per issue (rework / recovery)"""
    return projects_per_year * (prob_major_issue_pct / 100) * avg_cost_per_major_issue


def calculate_waste_breakdown(inputs: CalculatorInput) -> WasteBreakdown:
    cost_overrun = calculate_cost_overrun_waste(
        inputs.projects_per_year,
        inputs.avg_budget_per_project,
        inputs.avg_cost_overrun_pct,
    )
    delay = calculate_delay_waste(
        inputs.projects_per_year,
        inputs.avg_schedule_slip_weeks,
        inputs.cost_per_week_of_delay,
    )
    risk = calculate_risk_waste(
        inputs.projects_per_year,
        inputs.prob_major_issue_pct,
        inputs.avg_cost_per_major_issue,
    )

    return WasteBreakdown(
        cost_overrun_waste=cost_overrun,
        delay_waste=delay,
        risk_waste=risk,
        total_annual_waste=cost_overrun + delay + risk,
    )


# -------------------------------------------------------------------
# SCENARIOS
# -------------------------------------------------------------------

def calculate_savings_scenario(
    total_annual_waste: float,
    improvement_pct: float,
    engagement_cost: float,
    payback_cap: Optional[float] = None,
) -> SavingsScenario:
    """
    Project savings, ROI and payback for one improvement percentage.

    With no engagement cost ROI is reported as 0 rather than infinite.
    Payback is capped (999 months by default), including the case where
    nothing is saved at all.
    """
    cap = MAX_PAYBACK_MONTHS if payback_cap is None else payback_cap

    savings = total_annual_waste * (improvement_pct / 100)
    net_savings = savings - engagement_cost
    roi_percent = (net_savings / engagement_cost) * 100 if engagement_cost > 0 else 0.0
    roi_multiple = savings / engagement_cost if engagement_cost > 0 else 0.0
    payback_months = engagement_cost / (savings / 12) if savings > 0 else math.inf

    return SavingsScenario(
        percentage=improvement_pct,
        savings=savings,
        net_savings=net_savings,
        roi_percent=roi_percent,
        roi_multiple=roi_multiple,
        payback_months=min(payback_months, cap),
    )
