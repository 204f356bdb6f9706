"""Condition-driven repair plan and the executive summary text."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Optional

from core.calculators import calculate_repair_roi
from core.models import AnalysisReport, PropertyRecord, RepairCategory
from core.presets import MARKET_CONDITIONS, QUICK_WINS, SEASONAL_FACTORS
from core.rules import apply_condition_rules

logger = logging.getLogger(__name__)

BASELINE_DAYS_ON_MARKET = 43
MAX_DOM_IMPROVEMENT = 25


def competitive_advantage(roi_pct: float) -> str:
    if roi_pct > 50:
        return "Strong"
    if roi_pct > 20:
        return "Moderate"
    return "Limited"


def success_probability(roi_pct: float) -> str:
    if roi_pct > 50:
        return "HIGH (85-95%)"
    if roi_pct > 20:
        return "MODERATE (70-85%)"
    return "STANDARD (60-75%)"


def expected_days_on_market(time_reduction: int) -> int:
    return BASELINE_DAYS_ON_MARKET - min(time_reduction, MAX_DOM_IMPROVEMENT)


def _bullets(items, empty: str) -> str:
    return "\n".join(f"• {i}" for i in items) if items else f"• {empty}"


def _condition_value(value) -> str:
    if isinstance(value, list):
        return ", ".join(value) if value else "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def run_market_analysis(
    property_data: PropertyRecord,
    budgets: Mapping[str, float],
    categories: Mapping[str, RepairCategory],
    generated_at: Optional[datetime] = None,
) -> AnalysisReport:
    """Build a repair plan from the property's conditions and summarize it.

    The returned ``budgets`` replace the session's repair budgets; this is the
    only calculator whose output is written back into state.
    """

    if property_data is None or property_data.conditions is None:
        return AnalysisReport(budgets=dict(budgets or {}), error="Property condition data is missing")

    conditions = property_data.conditions
    new_budgets, results = apply_condition_rules(conditions, budgets, categories)
    roi = calculate_repair_roi(new_budgets, categories, property_data.current_value)
    if roi.error:
        return AnalysisReport(budgets=new_budgets, roi=roi, error=roi.error)

    priority_actions = [r.priority_action for r in results if r.priority_action]
    recommendations = [r.recommendation for r in results if r.recommendation]
    roi_pct = float(roi.roi_percent)
    stamp = (generated_at or datetime.now()).strftime("%m/%d/%Y, %I:%M:%S %p")

    condition_lines = [
        f"{key.capitalize()}: {_condition_value(value)} → Budget: ${new_budgets.get(key, 0):,.0f}"
        for key, value in conditions.model_dump().items()
    ]

    summary = f"""🏠 CLUES S.M.A.R.T. DASHBOARD - MARKET ANALYSIS
Generated: {stamp}

📊 PROPERTY CONDITION ANALYSIS:
{_bullets(condition_lines, "No condition data")}

🔧 IDENTIFIED DEFECTS:
{_bullets(conditions.defects, "No major defects identified")}

🎯 PRIORITY ACTIONS:
{_bullets(priority_actions, "Standard market preparation recommended")}

💰 INVESTMENT ANALYSIS:
- Total Investment Required: ${roi.total_investment:,.0f}
- Expected Value Added: ${roi.value_added:,}
- Net ROI: ${roi.net_roi:,} ({roi.roi_percent}%)
- Time Reduction: {roi.time_reduction_days} days
- New Estimated Value: ${roi.new_estimated_value:,}

📈 MARKET POSITIONING:
- Current Market: {MARKET_CONDITIONS}
- Seasonal Factors: {SEASONAL_FACTORS}
- Competitive Advantage: {competitive_advantage(roi_pct)}

💡 KEY RECOMMENDATIONS:
{_bullets(recommendations, "Follow standard market preparation guidelines")}

⚡ QUICK WINS (High ROI/Low Cost):
{chr(10).join(f"- {w}" for w in QUICK_WINS)}

🏆 SUCCESS PROBABILITY:
Based on current investments and market conditions, this property has a {success_probability(roi_pct)} probability of selling within {expected_days_on_market(roi.time_reduction_days)} days at list price.

Generated by CLUES S.M.A.R.T. Dashboard Analysis Engine"""

    logger.info(
        "Market analysis complete: investment=%s roi=%s%%",
        roi.total_investment,
        roi.roi_percent,
    )
    return AnalysisReport(
        budgets=new_budgets,
        roi=roi,
        priority_actions=priority_actions,
        recommendations=recommendations,
        summary=summary,
    )
