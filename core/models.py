from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from core.presets import REPAIR_CATEGORIES


class PropertyConditions(BaseModel):
    kitchen: str = "Fair"
    bathroom: str = "Fair"
    flooring: str = "Fair"
    painting: bool = False
    roofing: str = "Good"
    hvac: str = "Good"
    landscaping: str = "Fair"
    staging: str = "Medium"
    defects: List[str] = Field(default_factory=list)


class PropertyRecord(BaseModel):
    address: str = ""
    subdivision: str = ""
    list_price: float = 0.0
    current_value: float = 0.0
    purchase_price: float = 0.0
    purchase_date: str = ""
    sqft: float = 0.0
    bedrooms: float = 0.0
    bathrooms: float = 0.0
    lot_size: str = ""
    year_built: int = 0
    property_type: str = "Single Family"
    condition: Literal["Excellent", "Good", "Fair", "Poor"] = "Fair"
    garage: int = 0
    pool: bool = False
    hoa_fees: float = 0.0
    tax_assessment: float = 0.0
    annual_taxes: float = 0.0
    mls_number: str = ""
    days_on_market: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    conditions: PropertyConditions = Field(default_factory=PropertyConditions)


class ComparableListing(BaseModel):
    id: int = 0
    address: str = ""
    subdivision: str = ""
    distance: str = ""
    status: Literal["Subject", "Active", "Pending", "Sold"] = "Active"
    list_price: float = 0.0
    sold_price: Optional[float] = None
    sold_date: Optional[str] = None
    beds: float = 0.0
    baths: float = 0.0
    sqft: float = 0.0
    year: int = 0
    condition: str = ""
    price_per_sqft: float = 0.0
    days_on_market: int = 0
    latitude: float = 0.0
    longitude: float = 0.0


class RepairCategory(BaseModel):
    name: str
    roi: float
    time_reduction: int
    max_budget: float


def default_repair_categories() -> Dict[str, RepairCategory]:
    return {k: RepairCategory(**v) for k, v in REPAIR_CATEGORIES.items()}


def default_budgets() -> Dict[str, float]:
    return {k: 0 for k in REPAIR_CATEGORIES}


class MortgageParameters(BaseModel):
    purchase_price: float = 0.0
    down_payment: float = 0.0
    loan_amount: float = 0.0
    interest_rate: float = 0.0
    loan_term: float = 30
    property_tax: Optional[float] = 0.0
    home_insurance: Optional[float] = 0.0
    hoa: Optional[float] = 0.0
    pmi: Optional[float] = 0.0


class ClientRecord(BaseModel):
    id: int = 0
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    address: str = ""
    city: str = ""
    state: str = "FL"
    zip: str = ""
    subdivision: str = ""
    list_price: str = ""
    purchase_price: str = ""
    purchase_date: str = ""
    sqft: str = ""
    bedrooms: str = ""
    bathrooms: str = ""
    lot_size: str = ""
    year_built: str = ""
    property_type: str = "Single Family"
    condition: str = "Fair"
    garage: str = ""
    pool: bool = False
    current_mortgage_balance: str = ""
    monthly_payment: str = ""
    tax_assessment: str = ""
    annual_taxes: float = 3850
    hoa_fees: float = 0
    mls_number: str = ""
    has_deck: bool = False
    has_dock: bool = False
    has_porch: bool = False
    has_spa: bool = False
    has_master_suite: bool = False
    has_solar_heating: bool = False
    has_vaulted_ceilings: bool = False
    roof_condition: str = "Unknown"
    windows_condition: str = "Unknown"
    electric_panel_condition: str = "Unknown"
    water_heater_condition: str = "Unknown"
    doors_condition: str = "Unknown"
    paint_condition: str = "Unknown"
    repairs_needed: str = ""
    created_at: str = ""


class VersionSnapshot(BaseModel):
    id: int
    timestamp: datetime
    property_data: PropertyRecord
    repair_budgets: Dict[str, float]
    client_id: Optional[int] = None
    user_note: str = ""


class PropertyPhoto(BaseModel):
    id: int
    src: str
    name: str
    size: int
    uploaded_at: str


class MortgageResult(BaseModel):
    monthly_principal_and_interest: float = 0.0
    total_monthly_payment: float = 0.0
    total_interest: float = 0.0
    error: Optional[str] = None


class PropertyMetrics(BaseModel):
    avg_price_per_sqft: int = 0
    estimated_value: int = 0
    equity: int = 0
    appreciation_percent: float = 0.0
    error: Optional[str] = None


class RepairROIResult(BaseModel):
    total_investment: float = 0.0
    value_added: int = 0
    net_roi: int = 0
    roi_percent: str = "0.0"
    time_reduction_days: int = 0
    new_estimated_value: int = 0
    error: Optional[str] = None


class AnalysisReport(BaseModel):
    budgets: Dict[str, float] = Field(default_factory=dict)
    roi: RepairROIResult = Field(default_factory=RepairROIResult)
    priority_actions: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    summary: str = ""
    error: Optional[str] = None
