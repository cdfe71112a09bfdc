"""
app.py
──────
Flight Safety Monitor — Application Entry Point.

Startup sequence:
  1. Configure logging and create the flight simulation (history pre-seeded)
  2. Create Dash app with DARKLY bootstrap theme
  3. Register all callbacks against the simulation
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.data.session import FlightSimulation
from src.layout.main import create_layout

# ── 1. Logging + simulation ───────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("flight_safety_monitor")

simulation = FlightSimulation(seed_history=True)
logger.info("Flight simulation ready (%d readings seeded)", len(simulation.generator.history))

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Flight Safety Monitor",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 3. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import alerts, cockpit

cockpit.register(app, simulation)
alerts.register(app, simulation)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
