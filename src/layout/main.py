"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Store for tick / action counters shared between callbacks
  - dcc.Interval driving the simulation tick
  - Navbar + cockpit page
"""
from dash import dcc, html

from config.settings import settings
from src.layout.navbar import create_navbar
from src.pages import cockpit


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id="store-tick", data=0),
            dcc.Store(id="store-action", data=0),  # bumped after every crew action

            # ── Simulation tick ───────────────────────────────────────────────
            dcc.Interval(
                id="interval-live",
                interval=settings.UPDATE_INTERVAL_MS,
                n_intervals=0,
            ),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                cockpit.layout(),
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("Flight Safety Monitor"),
                    html.Span(" · "),
                    html.Span("Simulated telemetry · Not for operational use"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
