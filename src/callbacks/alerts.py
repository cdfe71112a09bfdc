"""
src/callbacks/alerts.py
────────────────────────
Critical alert, crew alert and life-saving systems callbacks.

All crew actions funnel through one callback that dispatches on the
triggering component and bumps "store-action" so panels re-render
without waiting for the next tick.
"""
from __future__ import annotations

from dash import ALL, Input, Output, State, ctx, html
from dash.exceptions import PreventUpdate

from config.alerts import ALERT_TYPE_LABELS, EMERGENCY_UI_MIN_SEVERITY, MAX_CREW_ALERTS_DISPLAY
from src.data.models import CrewAlert, CriticalAlert, LifeSavingSystem
from src.data.procedures import sort_airports
from src.data.session import FlightSimulation
from src.layout.components.alert_badge import priority_badge, severity_badge
from src.layout.components.kpi_card import mini_kpi

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"
OK = "#2ea44f"
DANGER = "#da3633"


def _button_style(color: str, done: bool = False) -> dict:
    return {
        "fontSize": ".68rem",
        "fontWeight": "600",
        "color": OK if done else color,
        "background": "transparent",
        "border": f"1px solid {OK if done else color}",
        "borderRadius": "4px",
        "padding": "2px 8px",
        "cursor": "default" if done else "pointer",
        "opacity": "0.6" if done else "1",
    }


def _procedure_row(alert: CriticalAlert, proc) -> html.Div:
    return html.Div(
        [
            html.Button(
                "✓" if proc.completed else str(proc.step),
                id={"type": "complete-proc-btn", "index": f"{alert.id}|{proc.step}"},
                n_clicks=0,
                disabled=proc.completed,
                style=_button_style("#58a6ff", proc.completed),
            ),
            html.Span(
                proc.action,
                style={
                    "fontSize": ".76rem",
                    "color": MUTED if proc.completed else "#c9d1d9",
                    "textDecoration": "line-through" if proc.completed else "none",
                    "marginLeft": "8px",
                },
            ),
            html.Span(
                f"{proc.time_limit}s" + (" · critical" if proc.critical else ""),
                style={"fontSize": ".66rem", "color": DANGER if proc.critical else MUTED, "marginLeft": "8px"},
            ),
        ],
        style={"display": "flex", "alignItems": "center", "marginBottom": "4px"},
    )


def _critical_card(alert: CriticalAlert) -> html.Div:
    airports = sort_airports(alert.nearest_airports, key="eta")
    return html.Div(
        [
            html.Div(
                [
                    severity_badge(alert.severity),
                    html.Span(ALERT_TYPE_LABELS.get(alert.type, alert.type.value), style={"fontSize": ".7rem", "color": MUTED, "marginLeft": "8px"}),
                    html.Span(
                        f"Act within {alert.time_to_action}s · {alert.confidence:.1f}% confidence",
                        style={"fontSize": ".7rem", "color": MUTED, "marginLeft": "auto"},
                    ),
                ],
                style={"display": "flex", "alignItems": "center", "marginBottom": "6px"},
            ),
            html.Div(alert.title, style={"fontWeight": "700", "color": DANGER if not alert.acknowledged else "#c9d1d9"}),
            html.Div(alert.message, style={"fontSize": ".78rem", "color": MUTED, "marginBottom": "8px"}),
            html.Div([_procedure_row(alert, p) for p in alert.emergency_procedures], style={"marginBottom": "8px"}),
            html.Div(
                "Divert: " + " · ".join(
                    f"{a.code} {a.distance_nm:.0f}nm {a.estimated_arrival_min}min" + ("" if a.emergency_services else " (no ARFF)")
                    for a in airports
                ),
                style={"fontSize": ".72rem", "color": "#58a6ff", "marginBottom": "8px"},
            ),
            html.Button(
                "✓ Acknowledged" if alert.acknowledged else "Acknowledge",
                id={"type": "ack-critical-btn", "index": alert.id},
                n_clicks=0,
                disabled=alert.acknowledged,
                style=_button_style(DANGER, alert.acknowledged),
            ),
        ],
        style={
            "backgroundColor": "rgba(218,54,51,0.08)" if not alert.acknowledged else CARD_BG,
            "border": f"1px solid {DANGER if not alert.acknowledged else BORDER}",
            "borderRadius": "8px",
            "padding": "12px 14px",
            "marginBottom": "10px",
        },
    )


def _crew_row(crew: CrewAlert) -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    priority_badge(crew.priority.value),
                    html.Span("🔊" if crew.voice_alert else "", style={"marginLeft": "6px"}),
                    html.Span(crew.timestamp.strftime("%H:%M:%S"), style={"fontSize": ".68rem", "color": MUTED, "marginLeft": "auto"}),
                ],
                style={"display": "flex", "alignItems": "center"},
            ),
            html.Div(crew.message, style={"fontSize": ".78rem", "fontWeight": "600", "margin": "4px 0"}),
            html.Div(crew.visual_cue, style={"fontSize": ".68rem", "color": "#f0883e"}),
            html.Button(
                "Dismiss",
                id={"type": "ack-crew-btn", "index": crew.id},
                n_clicks=0,
                style=_button_style("#58a6ff"),
            ),
        ],
        style={"borderBottom": f"1px solid {BORDER}", "padding": "8px 0"},
    )


def _flag(label: str, on: bool) -> html.Div:
    return mini_kpi(label, "ON" if on else "OFF", OK if on else MUTED)


def _life_saving_panel(systems: LifeSavingSystem) -> html.Div:
    ox = systems.oxygen_system
    evac = systems.emergency_evacuation
    comms = systems.communication_systems
    fire = systems.fire_suppression_system
    grid = {"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "6px", "marginBottom": "10px"}
    return html.Div(
        [
            html.Div(
                [
                    _flag("Pax masks", ox.passenger_masks),
                    _flag("Crew masks", ox.crew_masks),
                    mini_kpi("O₂ pressure", f"{ox.oxygen_pressure:.0f} PSI"),
                    mini_kpi("O₂ duration", f"{ox.estimated_duration_min:.0f} min"),
                ],
                style=grid,
            ),
            html.Div(
                [
                    _flag("Slides armed", evac.slides_armed),
                    _flag("Emergency lighting", evac.emergency_lighting),
                    _flag("Exit path", evac.exit_path_illumination),
                    _flag("Crew stations", evac.crew_stations),
                ],
                style=grid,
            ),
            html.Div(
                [
                    _flag("MAYDAY", comms.mayday_transmitted),
                    mini_kpi("Squawk", comms.squawk_code, DANGER if comms.squawk_code == "7700" else "#c9d1d9"),
                    _flag("ATC contact", comms.atc_contact),
                    _flag("Guard frequency", comms.emergency_frequency),
                ],
                style=grid,
            ),
            html.Div(
                [
                    mini_kpi("Fire bottles", str(fire.engine_fire_bottles)),
                    _flag("Cargo suppression", fire.cargo_fire_suppression),
                ],
                style=grid,
            ),
        ]
    )


def register(app, simulation: FlightSimulation) -> None:

    @app.callback(
        [
            Output("critical-alerts-panel", "children"),
            Output("crew-alerts-panel", "children"),
            Output("life-saving-panel", "children"),
        ],
        [
            Input("store-tick", "data"),
            Input("store-action", "data"),
        ],
    )
    def update_alerts(tick: int, action: int):
        snapshot = simulation.snapshot()

        if snapshot.critical_alerts:
            pending = simulation.store.unacknowledged_critical(min_severity=EMERGENCY_UI_MIN_SEVERITY)
            header = html.Div(
                f"{len(pending)} unacknowledged critical alert(s)" if pending else "All critical alerts acknowledged",
                style={"fontSize": ".72rem", "fontWeight": "700", "color": DANGER if pending else OK, "marginBottom": "6px", "textTransform": "uppercase"},
            )
            critical = html.Div([header] + [_critical_card(a) for a in snapshot.critical_alerts])
        else:
            critical = html.Div()

        if snapshot.crew_alerts:
            crew = html.Div([_crew_row(c) for c in snapshot.crew_alerts[:MAX_CREW_ALERTS_DISPLAY]])
        else:
            crew = html.Div("No crew alerts.", style={"color": MUTED, "fontSize": ".8rem"})

        return critical, crew, _life_saving_panel(snapshot.life_saving_systems)

    @app.callback(
        Output("store-action", "data"),
        [
            Input({"type": "ack-critical-btn", "index": ALL}, "n_clicks"),
            Input({"type": "ack-crew-btn", "index": ALL}, "n_clicks"),
            Input({"type": "complete-proc-btn", "index": ALL}, "n_clicks"),
            Input({"type": "activate-btn", "index": ALL}, "n_clicks"),
            Input("mode-toggle-btn", "n_clicks"),
        ],
        State("store-action", "data"),
        prevent_initial_call=True,
    )
    def handle_crew_action(ack_critical, ack_crew, complete, activate, toggle, action_count):
        # Re-rendered buttons fire with n_clicks=0; only real clicks count
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            raise PreventUpdate

        trigger = ctx.triggered_id
        if trigger == "mode-toggle-btn":
            simulation.toggle_mode()
        elif trigger["type"] == "ack-critical-btn":
            simulation.acknowledge_critical(trigger["index"])
        elif trigger["type"] == "ack-crew-btn":
            simulation.acknowledge_crew(trigger["index"])
        elif trigger["type"] == "complete-proc-btn":
            alert_id, _, step = trigger["index"].rpartition("|")
            simulation.complete_procedure(alert_id, int(step))
        elif trigger["type"] == "activate-btn":
            simulation.activate_system(trigger["index"])
        return (action_count or 0) + 1
