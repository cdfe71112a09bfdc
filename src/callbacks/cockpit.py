"""
src/callbacks/cockpit.py
─────────────────────────
Simulation tick, telemetry, health, passenger safety and analysis panel callbacks.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, html

from config.thresholds import DEFAULT_THRESHOLDS, TelemetryThresholds
from src.analytics.health_index import SUBSYSTEM_LABELS, health_color, turbulence_label, weakest_subsystems
from src.analytics.thresholds import evaluate_current_value, get_static_thresholds, get_value_color
from src.data.models import FlightMode, SimulationSnapshot
from src.data.session import FlightSimulation
from src.data.simulator import to_dataframe
from src.data.weather import flight_recommendation, is_safe_for_landing
from src.layout.components.alert_badge import risk_badge
from src.layout.components.health_gauge import health_gauge, health_tile
from src.layout.components.kpi_card import kpi_card, mini_kpi
from src.layout.navbar import mode_btn_style

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"
PLOTLY_TMPL = "plotly_dark"

# (field, label, unit, format)
_KPIS = [
    ("engine_temp_f", "Engine Temp", "°F", "{:.0f}"),
    ("vibration_level", "Vibration", "", "{:.1f}"),
    ("oil_pressure_psi", "Oil Pressure", "PSI", "{:.1f}"),
    ("cabin_pressure_psi", "Cabin Pressure", "PSI", "{:.2f}"),
    ("fuel_quantity_pct", "Fuel", "%", "{:.0f}"),
    ("altitude_ft", "Altitude", "ft", "{:,.0f}"),
]


def _layout(height: int = 260) -> dict:
    return {
        "template": PLOTLY_TMPL,
        "paper_bgcolor": CARD_BG,
        "plot_bgcolor": CARD_BG,
        "margin": {"l": 10, "r": 10, "t": 10, "b": 10},
        "font": {"color": "#c9d1d9", "size": 11},
        "xaxis": {"gridcolor": GRID_CLR},
        "yaxis": {"gridcolor": GRID_CLR},
        "height": height,
        "showlegend": False,
    }


def _telemetry_chart(
    snapshot: SimulationSnapshot,
    variable: str,
    thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS,
) -> go.Figure:
    fig = go.Figure()
    df = to_dataframe(snapshot.history)
    if df.empty or variable not in df.columns:
        fig.update_layout(**_layout())
        return fig

    band = get_static_thresholds(variable, thresholds)
    fig.add_scatter(
        x=df["timestamp"],
        y=df[variable],
        mode="lines+markers",
        line={"color": get_value_color(float(df[variable].iloc[-1]), band), "width": 1.5},
        marker={"size": 3},
        hovertemplate="%{x|%H:%M:%S}<br>%{y:.2f}<extra></extra>",
    )

    if band.warning is not None:
        fig.add_hline(y=band.warning, line_dash="dot", line_color="#e8a020", line_width=1,
                      annotation_text="Warn", annotation_font_color="#e8a020", annotation_font_size=9)
    if band.critical is not None:
        fig.add_hline(y=band.critical, line_dash="solid", line_color="#da3633", line_width=1,
                      annotation_text="Crit", annotation_font_color="#da3633", annotation_font_size=9)

    fig.update_layout(**_layout())
    return fig


def _kpi_strip(snapshot: SimulationSnapshot, thresholds: TelemetryThresholds = DEFAULT_THRESHOLDS) -> dbc.Row:
    reading = snapshot.current
    if reading is None:
        return dbc.Row()
    cols = []
    for field, label, unit, fmt in _KPIS:
        value = getattr(reading, field)
        status = evaluate_current_value(value, get_static_thresholds(field, thresholds))
        cols.append(dbc.Col(kpi_card(label, fmt.format(value), status=status, unit=unit), xs=6, md=2))
    return dbc.Row(cols, className="g-2")


def _health_grid(snapshot: SimulationSnapshot) -> html.Div:
    health = snapshot.system_health.model_dump()
    weakest = ", ".join(
        f"{SUBSYSTEM_LABELS[name]} {value:.0f}%" for name, value in weakest_subsystems(snapshot.system_health)
    )
    return html.Div(
        [html.Div(f"Weakest: {weakest}", style={"fontSize": ".7rem", "color": MUTED, "marginBottom": "4px"})]
        + [health_tile(SUBSYSTEM_LABELS[name], value) for name, value in health.items() if name != "overall"]
    )


def _bullet_list(items: list[str], color: str) -> html.Ul:
    return html.Ul(
        [html.Li(i, style={"fontSize": ".74rem", "color": color}) for i in items],
        style={"paddingLeft": "18px", "marginBottom": "6px"},
    )


def _predictive_panel(snapshot: SimulationSnapshot) -> html.Div:
    p = snapshot.predictive
    risk_color = "#da3633" if p.risk_score >= 70 else "#e8a020" if p.risk_score >= 40 else "#2ea44f"
    children = [
        html.Div(
            [
                html.Span(f"{p.risk_score:.0f}", style={"fontSize": "1.8rem", "fontWeight": "700", "color": risk_color}),
                html.Span(" risk score", style={"fontSize": ".72rem", "color": MUTED}),
                html.Span(f"  ·  {p.confidence:.1f}% confidence", style={"fontSize": ".72rem", "color": MUTED}),
            ]
        ),
    ]
    if p.time_to_failure_h is not None:
        children.append(
            html.Div(f"Time to failure: {p.time_to_failure_h * 60:.0f} min", style={"fontSize": ".78rem", "color": "#da3633"})
        )
    if p.anomalies:
        children.append(_bullet_list(p.anomalies, "#f0883e"))
    if p.trends.degrading:
        children.append(html.Div("Degrading: " + ", ".join(p.trends.degrading), style={"fontSize": ".72rem", "color": "#da3633"}))
    if p.trends.improving:
        children.append(html.Div("Improving: " + ", ".join(p.trends.improving), style={"fontSize": ".72rem", "color": "#2ea44f"}))
    if p.trends.stable:
        children.append(html.Div("Stable: " + ", ".join(p.trends.stable), style={"fontSize": ".72rem", "color": MUTED}))
    return html.Div(children)


def _safety_panel(snapshot: SimulationSnapshot) -> html.Div:
    s = snapshot.safety
    if s is None:
        return html.Div("Awaiting first analysis…", style={"color": MUTED, "fontSize": ".8rem"})
    children = [
        html.Div(
            [risk_badge(s.risk_level.value), html.Span(f"  {s.confidence:.1f}% confidence", style={"fontSize": ".72rem", "color": MUTED})],
            style={"marginBottom": "6px"},
        ),
        html.Div(s.recommendation, style={"fontSize": ".8rem", "fontWeight": "600", "color": "#c9d1d9"}),
    ]
    if s.time_to_action is not None:
        children.append(html.Div(f"Act within {s.time_to_action // 60} min", style={"fontSize": ".72rem", "color": "#f0883e"}))
    if s.predicted_failure:
        children.append(html.Div(s.predicted_failure, style={"fontSize": ".72rem", "color": "#da3633"}))
    if s.risk_factors:
        children.append(_bullet_list(s.risk_factors, MUTED))
    if snapshot.insights is not None:
        children.append(html.Div(snapshot.insights.risk_projection, style={"fontSize": ".7rem", "color": MUTED, "marginTop": "6px"}))
    return html.Div(children)


def _weather_panel(snapshot: SimulationSnapshot) -> html.Div:
    w = snapshot.weather
    if w is None:
        return html.Div()
    rows = [
        ("Turbulence", f"{w.turbulence:.0f}"),
        ("Wind", f"{w.wind_speed:.0f} kts @ {w.wind_direction:.0f}°"),
        ("Visibility", f"{w.visibility:.1f} mi"),
        ("Lightning risk", f"{w.lightning_risk:.0f}%"),
    ]
    safe, reasons = is_safe_for_landing(w)
    landing = "Landing: suitable" if safe else "Landing: " + "; ".join(reasons)
    return html.Div(
        [html.Div([html.Span(k, style={"color": MUTED}), html.Span(f"  {v}")], style={"fontSize": ".76rem"}) for k, v in rows]
        + [
            html.Div(flight_recommendation(w), style={"fontSize": ".76rem", "fontWeight": "600", "marginTop": "6px"}),
            html.Div(landing, style={"fontSize": ".72rem", "color": "#2ea44f" if safe else "#da3633"}),
            html.Div("Fallback data" if w.is_fallback else "Live provider", style={"fontSize": ".65rem", "color": MUTED}),
        ]
    )


def _passenger_panel(snapshot: SimulationSnapshot) -> html.Div:
    p = snapshot.passenger_safety
    eq = p.emergency_equipment
    grid = {"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "6px", "marginBottom": "8px"}
    return html.Div(
        [
            html.Div(
                [
                    mini_kpi("Seatbelt sign", "ON" if p.seatbelt_sign else "OFF", "#da3633" if p.seatbelt_sign else "#2ea44f"),
                    mini_kpi("Turbulence", f"{turbulence_label(p.turbulence_level)} ({p.turbulence_level:.0f})",
                             health_color(100 - p.turbulence_level)),
                    mini_kpi("Cabin pressure", f"{p.cabin_pressure_psi:.1f} PSI"),
                    mini_kpi("Oxygen", f"{p.oxygen_level_pct:.0f}%", "#2ea44f" if p.oxygen_level_pct >= 20 else "#e8a020"),
                ],
                style=grid,
            ),
            html.Div(
                f"Life vests {eq.lifevests} · O₂ masks {eq.oxygen_masks} · Slides {eq.emergency_slides}",
                style={"fontSize": ".7rem", "color": MUTED},
            ),
        ]
    )


def register(app, simulation: FlightSimulation) -> None:

    @app.callback(
        Output("store-tick", "data"),
        Input("interval-live", "n_intervals"),
    )
    def advance_simulation(n_intervals: int) -> int:
        return simulation.step().tick

    @app.callback(
        [
            Output("telemetry-kpis", "children"),
            Output("telemetry-chart", "figure"),
            Output("overall-health-gauge", "children"),
            Output("system-health-grid", "children"),
            Output("predictive-panel", "children"),
            Output("safety-panel", "children"),
            Output("weather-panel", "children"),
            Output("passenger-safety-panel", "children"),
            Output("mode-status", "children"),
            Output("mode-toggle-btn", "children"),
            Output("mode-toggle-btn", "style"),
        ],
        [
            Input("store-tick", "data"),
            Input("store-action", "data"),
            Input("chart-variable", "value"),
        ],
    )
    def update_cockpit(tick: int, action: int, variable: str):
        snapshot = simulation.snapshot()
        emergency = snapshot.mode is FlightMode.EMERGENCY

        status = html.Span(
            "EMERGENCY MODE" if emergency else "NORMAL FLIGHT",
            style={"fontSize": ".78rem", "fontWeight": "700", "color": "#da3633" if emergency else "#2ea44f"},
        )
        return (
            _kpi_strip(snapshot, simulation.thresholds),
            _telemetry_chart(snapshot, variable, simulation.thresholds),
            health_gauge(snapshot.system_health.overall, "Overall", height=200),
            _health_grid(snapshot),
            _predictive_panel(snapshot),
            _safety_panel(snapshot),
            _weather_panel(snapshot),
            _passenger_panel(snapshot),
            status,
            "Resume normal flight" if emergency else "Simulate emergency",
            mode_btn_style(emergency),
        )
