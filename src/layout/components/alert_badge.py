"""
src/layout/components/alert_badge.py
──────────────────────────────────────
Severity / priority / risk badges.
"""

from dash import html

from config.alerts import PRIORITY_COLORS, RISK_COLORS

_SEVERITY_COLORS = {5: "#da3633", 4: "#f0883e", 3: "#e8a020", 2: "#58a6ff", 1: "#8b949e"}


def _badge(label: str, color: str) -> html.Span:
    return html.Span(
        label,
        style={
            "fontSize": ".65rem",
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "1px 7px",
            "whiteSpace": "nowrap",
        },
    )


def severity_badge(severity: int) -> html.Span:
    return _badge(f"SEV {severity}", _SEVERITY_COLORS.get(severity, "#8b949e"))


def priority_badge(priority: str) -> html.Span:
    return _badge(priority.upper(), PRIORITY_COLORS.get(priority, "#8b949e"))


def risk_badge(level: str) -> html.Span:
    return _badge(level, RISK_COLORS.get(level, "#8b949e"))
