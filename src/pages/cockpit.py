"""
src/pages/cockpit.py
─────────────────────
Cockpit dashboard page.

Static structure; telemetry, alerts and systems injected via callbacks.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.alerts import LifeSavingCommand

MUTED = "#8b949e"

_CHART_VARIABLES = [
    {"label": "Engine temperature (°F)", "value": "engine_temp_f"},
    {"label": "Vibration", "value": "vibration_level"},
    {"label": "Oil pressure (PSI)", "value": "oil_pressure_psi"},
    {"label": "Cabin pressure (PSI)", "value": "cabin_pressure_psi"},
    {"label": "Fuel quantity (%)", "value": "fuel_quantity_pct"},
    {"label": "Hydraulic pressure (PSI)", "value": "hydraulic_pressure_psi"},
    {"label": "Airspeed (kts)", "value": "airspeed_kts"},
    {"label": "Altitude (ft)", "value": "altitude_ft"},
]

_ACTION_BUTTONS = [
    (LifeSavingCommand.OXYGEN_MASKS, "Deploy oxygen masks"),
    (LifeSavingCommand.EVACUATION_PREP, "Prepare evacuation"),
    (LifeSavingCommand.MAYDAY, "Transmit MAYDAY"),
]


def _section_title(text: str) -> html.Div:
    return html.Div(text, className="chart-title")


def layout() -> html.Div:
    return html.Div(
        [
            # ── Page header ───────────────────────────────────────────────────
            html.Div(
                [
                    html.H2("Cockpit Safety Overview", className="page-title"),
                    html.P(
                        "Live telemetry, alert escalation and life-saving systems",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            # ── Critical alert banner (dynamic) ───────────────────────────────
            html.Div(id="critical-alerts-panel", className="mb-3"),
            # ── Telemetry KPI strip (dynamic) ─────────────────────────────────
            html.Div(id="telemetry-kpis", className="mb-3"),
            dbc.Row(
                [
                    # Live chart
                    dbc.Col(
                        html.Div(
                            [
                                _section_title("Telemetry — last 60 s"),
                                dcc.Dropdown(
                                    id="chart-variable",
                                    options=_CHART_VARIABLES,
                                    value="engine_temp_f",
                                    clearable=False,
                                    style={"fontSize": ".85rem", "marginBottom": "8px"},
                                    className="dark-dropdown",
                                ),
                                dcc.Graph(id="telemetry-chart", config={"displayModeBar": False}),
                            ],
                            className="chart-card",
                        ),
                        md=8,
                    ),
                    # Overall health gauge
                    dbc.Col(
                        html.Div(
                            [
                                _section_title("Aircraft Health"),
                                html.Div(id="overall-health-gauge"),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                ],
                className="g-3 mb-3",
            ),
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [_section_title("Subsystem Health"), html.Div(id="system-health-grid")],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div(
                            [_section_title("Crew Alerts"), html.Div(id="crew-alerts-panel")],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                _section_title("Life-Saving Systems"),
                                html.Div(
                                    [
                                        html.Button(
                                            label,
                                            id={"type": "activate-btn", "index": command.value},
                                            n_clicks=0,
                                            className="action-btn",
                                            style={
                                                "fontSize": ".72rem",
                                                "fontWeight": "600",
                                                "color": "#f0883e",
                                                "background": "transparent",
                                                "border": "1px solid #f0883e",
                                                "borderRadius": "4px",
                                                "padding": "3px 10px",
                                                "cursor": "pointer",
                                            },
                                        )
                                        for command, label in _ACTION_BUTTONS
                                    ],
                                    style={"display": "flex", "gap": "6px", "flexWrap": "wrap", "marginBottom": "10px"},
                                ),
                                html.Div(id="life-saving-panel"),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                ],
                className="g-3 mb-3",
            ),
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [_section_title("Predictive Analysis"), html.Div(id="predictive-panel")],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div(
                            [_section_title("Safety Risk Assessment"), html.Div(id="safety-panel")],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        [
                            html.Div(
                                [_section_title("Weather"), html.Div(id="weather-panel")],
                                className="chart-card mb-3",
                            ),
                            html.Div(
                                [_section_title("Passenger Safety"), html.Div(id="passenger-safety-panel")],
                                className="chart-card",
                            ),
                        ],
                        md=4,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
