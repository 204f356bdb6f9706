from typing import Dict, List
import streamlit as st
from core.models import (
    ComparableListing,
    MortgageParameters,
    PropertyRecord,
    RepairCategory,
    default_repair_categories,
)


def notify_success(message: str) -> None:
    st.toast(message, icon="✅")


def notify_error(message: str) -> None:
    st.toast(message, icon="⚠️")


def get_property() -> PropertyRecord:
    return PropertyRecord(**st.session_state["property"])


def get_comparables() -> List[ComparableListing]:
    return [ComparableListing(**c) for c in st.session_state["comparables"]]


def get_mortgage() -> MortgageParameters:
    return MortgageParameters(**st.session_state["mortgage"])


def get_categories() -> Dict[str, RepairCategory]:
    """The repair category table is fixed for the session."""
    return default_repair_categories()


def money(v) -> str:
    return f"${v:,.0f}"
