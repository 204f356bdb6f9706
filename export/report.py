"""CSV and JSON exports of the CMA data."""
from __future__ import annotations

import io
import json
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from core.models import ComparableListing, PropertyMetrics, PropertyRecord, RepairROIResult

CSV_COLUMNS = {
    "address": "Address",
    "status": "Status",
    "list_price": "List Price",
    "sold_price": "Sold Price",
    "beds": "Beds",
    "baths": "Baths",
    "sqft": "Sq Ft",
    "price_per_sqft": "Price/Sq Ft",
    "days_on_market": "Days on Market",
    "condition": "Condition",
}


def comparables_frame(comparables: Sequence[ComparableListing]) -> pd.DataFrame:
    rows = [c.model_dump() for c in comparables]
    df = pd.DataFrame(rows, columns=list(CSV_COLUMNS))
    return df.rename(columns=CSV_COLUMNS)


def comparables_csv(comparables: Sequence[ComparableListing]) -> bytes:
    """Comparables in a fixed column order; a missing sold price is left blank."""
    buf = io.StringIO()
    comparables_frame(comparables).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def build_report_bundle(
    property_data: PropertyRecord,
    metrics: PropertyMetrics,
    roi: RepairROIResult,
    comparables: Sequence[ComparableListing],
    generated_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    return {
        "title": "CLUES S.M.A.R.T. Dashboard - CMA Report",
        "generated_at": (generated_at or datetime.now()).isoformat(),
        "property": {
            "address": property_data.address,
            "list_price": property_data.list_price,
            "sqft": property_data.sqft,
            "condition": property_data.condition,
        },
        "metrics": {
            "estimated_value": metrics.estimated_value,
            "avg_price_per_sqft": metrics.avg_price_per_sqft,
            "appreciation": metrics.appreciation_percent,
        },
        "repairs": {
            "total_investment": roi.total_investment,
            "total_value_added": roi.value_added,
            "net_roi": roi.net_roi,
            "time_reduction": roi.time_reduction_days,
        },
        "comparables": [c.model_dump() for c in comparables if c.status != "Subject"],
        "recommendations": "Based on market analysis and property condition",
    }


def report_json(bundle: Dict[str, Any]) -> bytes:
    return json.dumps(bundle, indent=2).encode("utf-8")
