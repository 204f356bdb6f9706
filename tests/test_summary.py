from datetime import datetime
from core.models import PropertyRecord, default_budgets, default_repair_categories
from core.presets import DEFAULT_PROPERTY
from core.summary import (
    competitive_advantage,
    expected_days_on_market,
    run_market_analysis,
    success_probability,
)

CATS = default_repair_categories()


def test_buckets():
    assert competitive_advantage(60) == "Strong"
    assert competitive_advantage(50) == "Moderate"
    assert competitive_advantage(20) == "Limited"
    assert success_probability(51) == "HIGH (85-95%)"
    assert success_probability(21) == "MODERATE (70-85%)"
    assert success_probability(-3) == "STANDARD (60-75%)"


def test_expected_days_on_market():
    assert expected_days_on_market(0) == 43
    assert expected_days_on_market(10) == 33
    assert expected_days_on_market(45) == 18


def test_market_analysis_on_default_property():
    prop = PropertyRecord(**DEFAULT_PROPERTY)
    report = run_market_analysis(prop, default_budgets(), CATS, generated_at=datetime(2025, 3, 1, 9, 30))
    assert report.error is None
    assert report.budgets["kitchen"] == 15000
    assert report.roi.total_investment == 37300
    assert report.roi.roi_percent == "12.5"
    assert report.roi.time_reduction_days == 45
    assert report.priority_actions == []
    assert report.recommendations == ["Kitchen updates will significantly improve marketability"]

    text = report.summary
    assert "Generated: 03/01/2025, 09:30:00 AM" in text
    for heading in (
        "PROPERTY CONDITION ANALYSIS:",
        "IDENTIFIED DEFECTS:",
        "PRIORITY ACTIONS:",
        "INVESTMENT ANALYSIS:",
        "MARKET POSITIONING:",
        "KEY RECOMMENDATIONS:",
        "QUICK WINS",
        "SUCCESS PROBABILITY:",
    ):
        assert heading in text
    assert "• No major defects identified" in text
    assert "• Standard market preparation recommended" in text
    assert "Competitive Advantage: Limited" in text
    assert "• Painting: false → Budget: $0" in text
    assert "Painting: False" not in text
    assert "STANDARD (60-75%) probability of selling within 18 days" in text


def test_market_analysis_lists_defects():
    data = dict(DEFAULT_PROPERTY)
    data["conditions"] = dict(DEFAULT_PROPERTY["conditions"], defects=["Cracked driveway"], kitchen="Poor")
    report = run_market_analysis(PropertyRecord(**data), default_budgets(), CATS)
    assert "• Cracked driveway" in report.summary
    assert "• Kitchen requires major renovation" in report.summary


def test_market_analysis_without_property():
    report = run_market_analysis(None, {"kitchen": 5}, CATS)
    assert report.error == "Property condition data is missing"
    assert report.budgets == {"kitchen": 5}
