"""
src/layout/components/health_gauge.py
──────────────────────────────────────
Subsystem health displays: Plotly gauge for the overall figure and a
compact bar tile per subsystem.
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc, html

from src.analytics.health_index import health_color

CARD_BG = "#161b22"
MUTED = "#8b949e"


def health_gauge(
    value: float,
    label: str,
    height: int = 200,
) -> dcc.Graph:
    """
    Plotly gauge indicator for a health percentage.

    Args:
        value: 0–100 value
        label: Title shown above the gauge
        height: Figure height in px
    """
    color = health_color(value)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=value,
        number={"suffix": "%", "font": {"color": color, "size": 28}},
        title={"text": label, "font": {"color": MUTED, "size": 12}},
        gauge={
            "axis": {
                "range": [0, 100],
                "tickwidth": 1,
                "tickcolor": "#30363d",
                "tickfont": {"color": MUTED, "size": 9},
            },
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": "rgba(0,0,0,0)",
            "borderwidth": 0,
            "steps": [
                {"range": [0, 20],  "color": "rgba(218,54,51,0.15)"},
                {"range": [20, 40], "color": "rgba(240,136,62,0.12)"},
                {"range": [40, 60], "color": "rgba(232,160,32,0.10)"},
                {"range": [60, 80], "color": "rgba(88,166,255,0.10)"},
                {"range": [80, 100], "color": "rgba(46,164,79,0.10)"},
            ],
            "threshold": {
                "line": {"color": "#da3633", "width": 2},
                "thickness": 0.75,
                "value": 20,
            },
        },
    ))

    fig.update_layout(
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin=dict(l=20, r=20, t=40, b=20),
        height=height,
        font=dict(color="#c9d1d9"),
    )

    return dcc.Graph(
        figure=fig,
        config={"displayModeBar": False},
        style={"height": f"{height}px"},
    )


def health_tile(label: str, value: float) -> html.Div:
    """Label, percentage and a thin progress bar."""
    color = health_color(value)
    return html.Div(
        [
            html.Div(
                [
                    html.Span(label, style={"fontSize": ".7rem", "color": MUTED}),
                    html.Span(f"{value:.0f}%", style={"fontSize": ".8rem", "fontWeight": "700", "color": color}),
                ],
                style={"display": "flex", "justifyContent": "space-between"},
            ),
            html.Div(
                html.Div(style={"width": f"{value:.0f}%", "height": "100%", "backgroundColor": color, "borderRadius": "3px"}),
                style={"height": "5px", "backgroundColor": "#30363d", "borderRadius": "3px", "marginTop": "4px"},
            ),
        ],
        style={"padding": "6px 0"},
    )
