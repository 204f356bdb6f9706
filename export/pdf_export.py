from __future__ import annotations
from typing import Any, Dict, IO, Union
from reportlab.lib.pagesizes import LETTER
from reportlab.lib import colors
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet
from core.presets import DISCLAIMER

TABLE_STYLE = TableStyle([('BACKGROUND',(0,0),(-1,0), colors.lightgrey),('BOX',(0,0),(-1,-1),1,colors.black),('INNERGRID',(0,0),(-1,-1),0.5,colors.grey)])


def _money(v) -> str:
    return f"${v:,.0f}" if isinstance(v, (int, float)) else str(v or "")


def _kv_table(title: str, rows: Dict[str, Any]) -> Table:
    t = Table([[title, ""]] + [[k, v] for k, v in rows.items()], hAlign='LEFT', colWidths=[200, 320])
    t.setStyle(TABLE_STYLE)
    return t


def build_cma_pdf(out: Union[str, IO[bytes]], bundle: Dict[str, Any]) -> None:
    """Render the CMA report bundle to ``out`` (a path or binary file object)."""
    if not bundle.get("property"):
        raise ValueError("report bundle has no property section")
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(out, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = []
    title = bundle.get("title", "CMA Report")
    story += [Paragraph(f"<b>{title}</b>", styles['Title']), Spacer(1,6)]
    if bundle.get("generated_at"):
        story.append(Paragraph(f"Generated: {bundle['generated_at'][:10]}", styles['Normal']))
    story += [Spacer(1, 12)]
    prop = bundle["property"]
    story += [_kv_table("Subject Property", {
        "Address": prop.get("address", ""),
        "List Price": _money(prop.get("list_price")),
        "Sq Ft": f"{prop.get('sqft', 0):,.0f}",
        "Condition": prop.get("condition", ""),
    }), Spacer(1, 12)]
    m = bundle.get("metrics", {})
    if m:
        story += [_kv_table("Valuation", {
            "Estimated Value": _money(m.get("estimated_value")),
            "Avg Price / Sq Ft": _money(m.get("avg_price_per_sqft")),
            "Appreciation": f"{m.get('appreciation', 0)}%",
        }), Spacer(1, 12)]
    r = bundle.get("repairs", {})
    if r:
        story += [_kv_table("Repair Investment", {
            "Total Investment": _money(r.get("total_investment")),
            "Value Added": _money(r.get("total_value_added")),
            "Net ROI": _money(r.get("net_roi")),
            "Days on Market Reduction": f"{r.get('time_reduction', 0)} days",
        }), Spacer(1, 12)]
    comps = bundle.get("comparables", [])
    if comps:
        rows = [["Address","Status","List Price","Sq Ft","$/Sq Ft","DOM"]]+[[c.get("address",""), c.get("status",""), _money(c.get("list_price")), f"{c.get('sqft',0):,.0f}", _money(c.get("price_per_sqft")), str(c.get("days_on_market",""))] for c in comps]
        t = Table(rows, hAlign='LEFT')
        t.setStyle(TABLE_STYLE)
        story += [Paragraph("<b>Comparable Properties</b>", styles['Heading3']), Spacer(1,6), t, Spacer(1,12)]
    if bundle.get("recommendations"):
        story.append(Paragraph(bundle["recommendations"], styles['Normal']))
    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles['Normal'])]
    doc.build(story)
