"""
src/layout/navbar.py
─────────────────────
Navigation bar with flight-mode status and the emergency scenario toggle.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"


def create_navbar() -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("✈", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "Flight Safety Monitor", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                html.Div(
                    [
                        html.Div(id="mode-status"),
                        html.Button(
                            "Simulate emergency",
                            id="mode-toggle-btn",
                            n_clicks=0,
                            style=mode_btn_style(False),
                        ),
                    ],
                    className="ms-auto",
                    style={"display": "flex", "gap": "12px", "alignItems": "center"},
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )


def mode_btn_style(emergency: bool) -> dict:
    color = "#da3633" if emergency else ACCENT
    return {
        "background": "rgba(218,54,51,0.15)" if emergency else "rgba(88,166,255,0.15)",
        "border": f"1px solid {color}",
        "color": color,
        "borderRadius": "4px",
        "fontSize": ".75rem",
        "fontWeight": "700",
        "padding": "4px 12px",
        "cursor": "pointer",
    }
