from core.models import PropertyConditions, default_budgets, default_repair_categories
from core.rules import apply_condition_rules, evaluate_condition_rules

CATS = default_repair_categories()


def _budgets(conditions, budgets=None):
    return apply_condition_rules(conditions, budgets or default_budgets(), CATS)[0]


def test_default_conditions():
    budgets = _budgets(PropertyConditions())
    assert budgets == {
        "kitchen": 15000,
        "bathroom": 7500,
        "flooring": 4800,
        "painting": 0,
        "roofing": 0,
        "hvac": 0,
        "landscaping": 2500,
        "staging": 7500,
    }


def test_poor_conditions_raise_budgets_and_actions():
    cond = PropertyConditions(
        kitchen="Poor", bathroom="Poor", flooring="Poor", painting=True,
        roofing="Poor", hvac="Poor", landscaping="Poor", staging="Needed",
    )
    new_budgets, results = apply_condition_rules(cond, default_budgets(), CATS)
    assert new_budgets["kitchen"] == 22500
    assert new_budgets["roofing"] == 20000
    assert new_budgets["painting"] == 6400
    assert new_budgets["staging"] == 12000
    actions = [r.priority_action for r in results if r.priority_action]
    assert actions[0] == "Kitchen requires major renovation"
    assert "Fresh paint is essential - highest ROI improvement" in actions
    recs = [r.recommendation for r in results if r.recommendation]
    assert "Curb appeal is critical in current market" in recs


def test_painting_recorded_as_text():
    results = evaluate_condition_rules(PropertyConditions(painting=False), CATS)
    assert "painting" not in {r.category for r in results}


def test_unmatched_categories_keep_budget():
    start = default_budgets()
    start["roofing"] = 1234
    start["hvac"] = 999
    budgets = _budgets(PropertyConditions(roofing="Excellent", hvac="Good"), start)
    assert budgets["roofing"] == 1234
    assert budgets["hvac"] == 999


def test_applying_twice_gives_same_result():
    cond = PropertyConditions(kitchen="Good", staging="Low")
    once = _budgets(cond)
    assert _budgets(cond, once) == once
    assert once["kitchen"] == 7500
    assert once["staging"] == 3000
