from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel

from core.calculators import round_half_up
from core.models import PropertyConditions, RepairCategory


class BudgetRule(BaseModel):
    fraction: float
    priority_action: Optional[str] = None
    recommendation: Optional[str] = None


class RuleResult(BaseModel):
    category: str
    condition: str
    budget: int
    priority_action: Optional[str] = None
    recommendation: Optional[str] = None


# Condition value -> share of the category's maximum budget.  Categories are
# checked in this order, which is also the order of the report's action lists.
CONDITION_RULES: Dict[str, Dict[object, BudgetRule]] = {
    "kitchen": {
        "Poor": BudgetRule(
            fraction=0.9,
            priority_action="Kitchen requires major renovation",
            recommendation="Kitchen is in poor condition - major remodel recommended for maximum ROI",
        ),
        "Fair": BudgetRule(
            fraction=0.6,
            recommendation="Kitchen updates will significantly improve marketability",
        ),
        "Good": BudgetRule(fraction=0.3, recommendation="Minor kitchen updates for competitive edge"),
    },
    "bathroom": {
        "Poor": BudgetRule(fraction=0.8, priority_action="Bathroom needs complete renovation"),
        "Fair": BudgetRule(fraction=0.5),
    },
    "flooring": {
        "Poor": BudgetRule(fraction=0.7, priority_action="Flooring replacement is critical"),
        "Fair": BudgetRule(fraction=0.4),
    },
    "painting": {
        True: BudgetRule(
            fraction=0.8,
            priority_action="Fresh paint is essential - highest ROI improvement",
            recommendation="Painting provides 194% ROI - highest priority",
        ),
    },
    "roofing": {
        "Poor": BudgetRule(fraction=1.0, priority_action="Roof replacement is critical for sale"),
        "Fair": BudgetRule(fraction=0.3),
    },
    "hvac": {
        "Poor": BudgetRule(fraction=0.9, priority_action="HVAC system needs replacement"),
        "Fair": BudgetRule(fraction=0.4),
    },
    "landscaping": {
        "Poor": BudgetRule(fraction=0.7, recommendation="Curb appeal is critical in current market"),
        "Fair": BudgetRule(fraction=0.5),
    },
    "staging": {
        "High": BudgetRule(
            fraction=0.8,
            priority_action="Professional staging essential in buyer's market",
        ),
        "Needed": BudgetRule(
            fraction=0.8,
            priority_action="Professional staging essential in buyer's market",
        ),
        "Medium": BudgetRule(fraction=0.5),
        "Low": BudgetRule(fraction=0.2),
    },
}
# a painting condition recorded as text rather than a flag
CONDITION_RULES["painting"]["Poor"] = CONDITION_RULES["painting"][True]


def evaluate_condition_rules(
    conditions: PropertyConditions, categories: Mapping[str, RepairCategory]
) -> List[RuleResult]:
    res: List[RuleResult] = []
    values = conditions.model_dump()
    for key, table in CONDITION_RULES.items():
        if key not in categories:
            continue
        value = values.get(key)
        rule = table.get(value) if isinstance(value, (str, bool)) else None
        if rule is None:
            continue
        res.append(
            RuleResult(
                category=key,
                condition=str(value),
                budget=round_half_up(categories[key].max_budget * rule.fraction),
                priority_action=rule.priority_action,
                recommendation=rule.recommendation,
            )
        )
    return res


def apply_condition_rules(
    conditions: PropertyConditions,
    budgets: Mapping[str, float],
    categories: Mapping[str, RepairCategory],
) -> Tuple[Dict[str, float], List[RuleResult]]:
    """Overwrite the budgets of every category a condition rule matches.

    Categories without a matching rule keep their current budget, so the
    result depends only on the conditions and the untouched entries.
    """
    results = evaluate_condition_rules(conditions, categories)
    new_budgets = dict(budgets)
    for r in results:
        new_budgets[r.category] = r.budget
    return new_budgets, results
