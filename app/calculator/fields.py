# app/calculator/fields.py

from typing import List

from .schemas import FIELD_LIMITS, CalculatorInput, InputFieldMeta

# Quick Estimate starting point
DEFAULT_INPUTS = CalculatorInput(
    projects_per_year=10,
    avg_budget_per_project=500_000,
    avg_cost_overrun_pct=15,
    avg_schedule_slip_weeks=4,
    cost_per_week_of_delay=25_000,
    prob_major_issue_pct=30,
    avg_cost_per_major_issue=100_000,
    engagement_cost=5_000,
)


def _meta(name: str, key: str, label: str, tooltip: str, step: float,
          prefix: str = "", suffix: str = "", quick_mode: bool = True) -> InputFieldMeta:
    low, high = FIELD_LIMITS[name]
    return InputFieldMeta(
        key=key,
        label=label,
        tooltip=tooltip,
        prefix=prefix,
        suffix=suffix,
        step=step,
        min=low,
        max=high,
        quick_mode=quick_mode,
    )


INPUT_FIELDS: List[InputFieldMeta] = [
    _meta(
        "projects_per_year", "projectsPerYear", "Projects per Year",
        "Total number of projects your organization manages annually",
        step=1, suffix="projects",
    ),
    _meta(
        "avg_budget_per_project", "avgBudgetPerProject", "Average Project Budget",
        "Average total budget per project including labor, materials, and overhead",
        step=10_000, prefix="$",
    ),
    _meta(
        "avg_cost_overrun_pct", "avgCostOverrunPct", "Average Cost Overrun",
        "Typical percentage by which projects exceed their original budget",
        step=1, suffix="%",
    ),
    _meta(
        "avg_schedule_slip_weeks", "avgScheduleSlipWeeks", "Average Schedule Slip",
        "Typical number of weeks projects are delivered late",
        step=1, suffix="weeks",
    ),
    _meta(
        "cost_per_week_of_delay", "costPerWeekOfDelay", "Cost per Week of Delay",
        "Direct and indirect costs incurred for each week a project is delayed "
        "(lost revenue, extended labor, opportunity cost)",
        step=1_000, prefix="$", suffix="/week",
    ),
    _meta(
        "prob_major_issue_pct", "probMajorIssuePct", "Major Issue Probability",
        "Likelihood that a project will encounter a significant issue requiring rework or escalation",
        step=1, suffix="%",
    ),
    _meta(
        "avg_cost_per_major_issue", "avgCostPerMajorIssue", "Average Major Issue Cost",
        "Typical cost to resolve a major project issue including rework, delays, and recovery efforts",
        step=10_000, prefix="$",
    ),
    _meta(
        "engagement_cost", "engagementCost", "Engagement Investment",
        "Total investment in audit and implementation services. "
        "The $5,000 audit fee is credited toward implementation contracts.",
        step=1_000, prefix="$", quick_mode=False,
    ),
]
