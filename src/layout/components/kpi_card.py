"""
src/layout/components/kpi_card.py
──────────────────────────────────
Telemetry KPI card: one flight parameter with its threshold status.
"""
from dash import html

from config.alerts import STATUS_COLORS, STATUS_LABELS

CARD_BG = "#161b22"
MUTED = "#8b949e"


def kpi_card(
    label: str,
    value: str,
    status: str = "ok",
    unit: str = "",
    icon: str = "",
) -> html.Div:
    """
    Compact telemetry card.

    Args:
        label: Parameter name (shown above value)
        value: Formatted value string
        status: "ok" | "warning" | "critical"; drives colour and border
        unit: Unit suffix shown after the value
        icon: Optional single-char/emoji icon
    """
    color = STATUS_COLORS.get(status, "#c9d1d9")
    children = []
    if icon:
        children.append(html.Div(icon, style={"fontSize": "1.2rem", "marginBottom": "4px"}))
    children.append(
        html.Div(label, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"})
    )
    children.append(
        html.Div(
            [value, html.Span(f" {unit}" if unit else "", style={"fontSize": ".75rem", "color": MUTED})],
            style={"fontSize": "1.4rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"},
        )
    )
    children.append(
        html.Div(STATUS_LABELS.get(status, status.upper()), style={"fontSize": ".62rem", "fontWeight": "700", "color": color, "marginTop": "4px"})
    )

    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {color if status != 'ok' else '#30363d'}",
            "borderRadius": "8px",
            "padding": "12px 14px",
            "minWidth": "120px",
        },
    )


def mini_kpi(label: str, value: str, color: str = "#c9d1d9") -> html.Div:
    """Inline label/value pair for the life-saving systems panel."""
    return html.Div([
        html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
        html.Div(value, style={"fontSize": ".85rem", "fontWeight": "700", "color": color}),
    ])
