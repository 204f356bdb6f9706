DISCLAIMER = (
    "This comparative market analysis is an estimate prepared from comparable listings and "
    "generic repair return-on-investment figures. It is not an appraisal. Comparable data shown "
    "here is sample data until a live MLS feed is configured; verify values, condition and "
    "repair costs before advising a client."
)

# Repair categories: value added per dollar spent, days-on-market reduction when
# funded at all, and the maximum recommended budget.
REPAIR_CATEGORIES = {
    "kitchen": {"name": "Kitchen Remodel", "roi": 0.96, "time_reduction": 15, "max_budget": 25000},
    "bathroom": {"name": "Bathroom Update", "roi": 0.74, "time_reduction": 10, "max_budget": 15000},
    "flooring": {"name": "Flooring Refinish", "roi": 0.85, "time_reduction": 8, "max_budget": 12000},
    "painting": {"name": "Interior/Exterior Paint", "roi": 1.94, "time_reduction": 5, "max_budget": 8000},
    "roofing": {"name": "Roof Replacement", "roi": 0.70, "time_reduction": 12, "max_budget": 20000},
    "hvac": {"name": "HVAC Update", "roi": 0.66, "time_reduction": 8, "max_budget": 10000},
    "landscaping": {"name": "Landscaping", "roi": 1.53, "time_reduction": 7, "max_budget": 5000},
    "staging": {"name": "Professional Staging", "roi": 1.88, "time_reduction": 20, "max_budget": 15000},
}

DEFAULT_PROPERTY = {
    "address": "2015 Hillwood Dr, Clearwater, FL 33763",
    "subdivision": "Clearwater Acres",
    "list_price": 305000,
    "current_value": 305000,
    "purchase_price": 75000,
    "purchase_date": "2012",
    "sqft": 1148,
    "bedrooms": 2,
    "bathrooms": 1.5,
    "lot_size": "5,998 sq ft",
    "year_built": 1972,
    "property_type": "Single Family",
    "condition": "Fair",
    "garage": 1,
    "pool": False,
    "hoa_fees": 0,
    "tax_assessment": 225000,
    "annual_taxes": 3850,
    "mls_number": "",
    "days_on_market": 0,
    "latitude": 27.9778,
    "longitude": -82.7264,
    "conditions": {
        "kitchen": "Fair",
        "bathroom": "Fair",
        "flooring": "Fair",
        "painting": False,
        "roofing": "Good",
        "hvac": "Good",
        "landscaping": "Fair",
        "staging": "Medium",
        "defects": [],
    },
}

# First entry is the subject property itself.
DEFAULT_COMPARABLES = [
    {
        "id": 1, "address": "2015 Hillwood Dr, Clearwater, FL 33763", "subdivision": "Clearwater Acres",
        "distance": "Subject", "status": "Subject", "list_price": 305000, "sold_price": None,
        "beds": 2, "baths": 1.5, "sqft": 1148, "year": 1972, "condition": "Fair",
        "price_per_sqft": 266, "days_on_market": 0, "latitude": 27.9778, "longitude": -82.7264,
    },
    {
        "id": 2, "address": "2074 Hillwood Dr, Clearwater, FL 33763", "subdivision": "Clearwater Acres",
        "distance": "0.1 mi", "status": "Sold", "list_price": 420000, "sold_price": 420000, "sold_date": "5/24",
        "beds": 3, "baths": 2, "sqft": 1128, "year": 1970, "condition": "Excellent",
        "price_per_sqft": 372, "days_on_market": 22, "latitude": 27.9785, "longitude": -82.7269,
    },
    {
        "id": 3, "address": "2499 Indigo Dr, Clearwater, FL 33763", "subdivision": "Clearwater Meadows",
        "distance": "0.5 mi", "status": "Active", "list_price": 289900, "sold_price": None,
        "beds": 2, "baths": 1, "sqft": 1420, "year": 1975, "condition": "Poor",
        "price_per_sqft": 211, "days_on_market": 67, "latitude": 27.9751, "longitude": -82.7301,
    },
    {
        "id": 4, "address": "1982 Hillwood Dr, Clearwater, FL 33763", "subdivision": "Clearwater Acres",
        "distance": "0.2 mi", "status": "Pending", "list_price": 385000, "sold_price": None,
        "beds": 3, "baths": 2, "sqft": 1250, "year": 1973, "condition": "Good",
        "price_per_sqft": 308, "days_on_market": 35, "latitude": 27.9768, "longitude": -82.7258,
    },
]

# Canned listings returned by the mocked MLS search.
MOCK_MLS_COMPARABLES = [
    {
        "address": "2105 Hillwood Dr, Clearwater, FL 33763", "subdivision": "Clearwater Acres",
        "distance": "0.3 mi", "status": "Active", "list_price": 395000, "sold_price": None,
        "beds": 3, "baths": 2, "sqft": 1350, "year": 1974, "condition": "Good",
        "price_per_sqft": 293, "days_on_market": 18, "latitude": 27.9782, "longitude": -82.7271,
    },
    {
        "address": "2050 Hillwood Dr, Clearwater, FL 33763", "subdivision": "Clearwater Acres",
        "distance": "0.2 mi", "status": "Sold", "list_price": 410000, "sold_price": 405000, "sold_date": "6/24",
        "beds": 3, "baths": 2.5, "sqft": 1450, "year": 1971, "condition": "Excellent",
        "price_per_sqft": 279, "days_on_market": 12, "latitude": 27.9772, "longitude": -82.7261,
    },
]

DEFAULT_MORTGAGE = {
    "purchase_price": 420000,
    "down_payment": 105000,
    "loan_amount": 315000,
    "interest_rate": 7.25,
    "loan_term": 30,
    "property_tax": 320,
    "home_insurance": 150,
    "hoa": 0,
    "pmi": 0,
}

DEFAULT_CLIENT = {
    "name": "Demo Client",
    "email": "client@example.com",
    "phone": "(727) 555-0100",
    "property_address": "2015 Hillwood Dr",
    "city": "Clearwater",
    "state": "FL",
    "zip": "33763",
}

LOAN_TERMS = [15, 20, 25, 30, 40]
CONDITION_LEVELS = ["Excellent", "Good", "Fair", "Poor"]
STAGING_LEVELS = ["High", "Medium", "Low", "Needed"]
COMPONENT_CONDITIONS = ["Unknown", "New", "Good", "Fair", "Needs Repair", "Original"]
PROPERTY_TYPES = ["Single Family", "Condo", "Townhouse", "Multi-Family", "Villa"]

MAX_VERSIONS = 50
MAX_PHOTOS = 20
MAX_PHOTO_BYTES = 5 * 1024 * 1024
MAX_STORAGE_BYTES = 5 * 1024 * 1024
ALLOWED_PHOTO_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp"]
RECENT_DISPLAY_LIMIT = 10

MLS_DELAY_SECONDS = 1.5
MLS_TIMEOUT_SECONDS = 10.0

DEMO_ACCOUNTS = [
    {"email": "admin@clues.com", "password": "dashboard2024"},
    {"email": "demo@clues.com", "password": "demo123"},
    {"email": "test@clues.com", "password": "test123"},
]

MARKET_CONDITIONS = "buyer's market with increasing inventory"
SEASONAL_FACTORS = "Peak selling season approaching (spring market)"

QUICK_WINS = [
    "Professional photography and virtual tour ($500-800)",
    "Deep cleaning and decluttering ($200-500)",
    "Minor landscaping improvements ($500-1,500)",
    "Fresh interior paint touch-ups ($800-2,000)",
]

MARKET_TREND_DATA = [
    {"month": "Feb 2025", "avg_price": 440000, "inventory": 7200, "sold_count": 1800, "days_on_market": 42},
    {"month": "Mar 2025", "avg_price": 445000, "inventory": 7800, "sold_count": 1950, "days_on_market": 40},
    {"month": "Apr 2025", "avg_price": 448000, "inventory": 8200, "sold_count": 2100, "days_on_market": 38},
    {"month": "May 2025", "avg_price": 442000, "inventory": 8900, "sold_count": 1750, "days_on_market": 41},
    {"month": "Jun 2025", "avg_price": 437000, "inventory": 9390, "sold_count": 1600, "days_on_market": 45},
    {"month": "Jul 2025", "avg_price": 430000, "inventory": 4819, "sold_count": 788, "days_on_market": 48},
    {"month": "Aug 2025", "avg_price": 430000, "inventory": 4117, "sold_count": 750, "days_on_market": 43},
]

DAYS_ON_MARKET_BY_CONDITION = [
    {"condition": "Move-in Ready", "avg_days": 25, "price_range": "$450K-500K", "sales": 45},
    {"condition": "Minor Updates", "avg_days": 35, "price_range": "$400K-450K", "sales": 62},
    {"condition": "Cosmetic Repairs", "avg_days": 50, "price_range": "$350K-400K", "sales": 38},
    {"condition": "Major Repairs", "avg_days": 75, "price_range": "$300K-350K", "sales": 18},
    {"condition": "Fixer Upper", "avg_days": 120, "price_range": "$250K-300K", "sales": 8},
]

STAGING_IMPACT = [
    {"staging_level": "Professional Staging", "avg_days": 20, "sales_price_pct": 101.2, "cost": "$3000-5000"},
    {"staging_level": "Home Staging", "avg_days": 28, "sales_price_pct": 99.8, "cost": "$1500-3000"},
    {"staging_level": "Decluttered/Clean", "avg_days": 35, "sales_price_pct": 98.5, "cost": "$200-500"},
    {"staging_level": "As-Is/Occupied", "avg_days": 55, "sales_price_pct": 96.2, "cost": "$0"},
]

PRICING_STRATEGY = [
    {"strategy": "Market Price", "avg_days": 43, "success_rate": 85, "final_price_pct": 98.5},
    {"strategy": "2% Above Market", "avg_days": 60, "success_rate": 65, "final_price_pct": 96.2},
    {"strategy": "5% Above Market", "avg_days": 90, "success_rate": 40, "final_price_pct": 92.8},
    {"strategy": "3% Below Market", "avg_days": 20, "success_rate": 95, "final_price_pct": 101.5},
]

SEASONAL_DATA = [
    {"season": "Spring (Mar-May)", "avg_days": 28, "demand": "High", "inventory": "Medium"},
    {"season": "Summer (Jun-Aug)", "avg_days": 35, "demand": "Medium", "inventory": "High"},
    {"season": "Fall (Sep-Nov)", "avg_days": 45, "demand": "Medium", "inventory": "High"},
    {"season": "Winter (Dec-Feb)", "avg_days": 60, "demand": "Low", "inventory": "Very High"},
]
