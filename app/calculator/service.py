# app/calculator/service.py

import logging
from typing import Callable, Dict, Optional, Tuple

from .engine import calculate_savings_scenario, calculate_waste_breakdown
from .schemas import CalculatorOutput, ScenarioSet
from .validation import RawInput, validate_or_raise

logger = logging.getLogger(__name__)

# (scenario name, improvement %)
SCENARIO_PRESETS: Tuple[Tuple[str, float], ...] = (
    ("conservative", 10),
    ("moderate", 15),
    ("aggressive", 25),
)

CalculationObserver = Callable[[CalculatorOutput], None]


def compute_roi(
    raw: RawInput,
    on_calculated: Optional[CalculationObserver] = None,
    payback_cap: Optional[float] = None,
) -> CalculatorOutput:
    """
    Validate the inputs, then build the waste breakdown and the three
    savings scenarios.

    Raises ValidationError with every offending field; nothing is
    computed for invalid input. ``on_calculated`` is an optional
    analytics hook that receives the finished output.
    """
    inputs = validate_or_raise(raw)
    waste = calculate_waste_breakdown(inputs)

    scenarios = ScenarioSet(**{
        name: calculate_savings_scenario(
            waste.total_annual_waste,
            pct,
            inputs.engagement_cost,
            payback_cap=payback_cap,
        )
        for name, pct in SCENARIO_PRESETS
    })

    output = CalculatorOutput(waste_breakdown=waste, scenarios=scenarios, inputs=inputs)

    if on_calculated is not None:
        try:
            on_calculated(output)
        except Exception:
            # tracking hooks never break the calculation
            logger.exception("[calculator] on_calculated hook failed")

    return output


def notification_figures(output: CalculatorOutput) -> Dict[str, float]:
    """The four numbers forwarded to the lead webhook."""
    return {
        "total_annual_waste": output.waste_breakdown.total_annual_waste,
        "savings10": output.scenarios.conservative.savings,
        "savings15": output.scenarios.moderate.savings,
        "savings25": output.scenarios.aggressive.savings,
    }
