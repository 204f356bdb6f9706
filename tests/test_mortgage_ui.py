from streamlit.testing.v1 import AppTest
from core.calculators import calculate_mortgage_payment
from core.models import MortgageParameters
from core.presets import DEFAULT_MORTGAGE


def mortgage_app():
    from ui.mortgage import render_mortgage_tab

    render_mortgage_tab()


def _pi_caption(at):
    return next(c.value for c in at.caption if c.value.startswith("Monthly P&I"))


def test_pi_caption_follows_rate_changes():
    at = AppTest.from_function(mortgage_app)
    at.session_state["mortgage"] = dict(DEFAULT_MORTGAGE)
    at.run(timeout=30)
    expected = calculate_mortgage_payment(MortgageParameters(**DEFAULT_MORTGAGE)).monthly_principal_and_interest
    assert _pi_caption(at) == f"Monthly P&I: ${expected:,.2f}"

    at.number_input(key="mortgage_interest_rate").set_value(6.0).run(timeout=30)
    params = MortgageParameters(**dict(DEFAULT_MORTGAGE, interest_rate=6.0))
    expected2 = calculate_mortgage_payment(params).monthly_principal_and_interest
    assert _pi_caption(at) == f"Monthly P&I: ${expected2:,.2f}"
    assert at.session_state["mortgage"]["interest_rate"] == 6.0


def test_down_payment_rederives_loan_amount():
    at = AppTest.from_function(mortgage_app)
    at.session_state["mortgage"] = dict(DEFAULT_MORTGAGE)
    at.run(timeout=30)
    at.number_input(key="mortgage_down_payment").set_value(84000.0).run(timeout=30)
    assert at.session_state["mortgage"]["loan_amount"] == 336000
    assert any(c.value == "Loan Amount: $336,000" for c in at.caption)


def test_rejected_down_payment_keeps_loan():
    at = AppTest.from_function(mortgage_app)
    at.session_state["mortgage"] = dict(DEFAULT_MORTGAGE)
    at.run(timeout=30)
    at.number_input(key="mortgage_down_payment").set_value(500000.0).run(timeout=30)
    assert at.session_state["mortgage"]["loan_amount"] == 315000
    assert at.number_input(key="mortgage_down_payment").value == 105000.0
    assert [t.value for t in at.toast] == ["Down payment cannot exceed purchase price"]

    at.number_input(key="mortgage_interest_rate").set_value(6.0).run(timeout=30)
    assert at.session_state["mortgage"]["interest_rate"] == 6.0
    assert at.session_state["mortgage"]["down_payment"] == 105000
    assert at.number_input(key="mortgage_down_payment").value == 105000.0
    assert not at.toast


def test_loan_term_select():
    at = AppTest.from_function(mortgage_app)
    at.session_state["mortgage"] = dict(DEFAULT_MORTGAGE)
    at.run(timeout=30)
    at.selectbox(key="mortgage_loan_term").set_value(15).run(timeout=30)
    assert at.session_state["mortgage"]["loan_term"] == 15
