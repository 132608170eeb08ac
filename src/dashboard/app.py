"""Plotly Dash application — multi-page layout."""

import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import httpx
from dash import Dash, html, dcc, page_container, callback, Input, Output, State

from src.config import settings
from src.dashboard.theme import page_style, nav_style

logger = logging.getLogger(__name__)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="EMI Calculator",
)

app.layout = html.Div(id="theme-root", children=[
    # Display configuration passed explicitly to every page that renders money
    dcc.Store(id="display-config", storage_type="session", data={
        "base_currency": settings.base_currency,
        "display_currency": settings.default_display_currency,
        "dark_mode": False,
    }),
    # Rate table for display-config.base_currency (empty when unavailable)
    dcc.Store(id="rates-store", storage_type="memory", data={"base_currency": None, "rates": {}}),

    # Navigation
    html.Nav(id="nav-bar", children=[
        html.Div([
            dcc.Link("Loan Calculator", href="/", style={"fontSize": "1.5rem", "color": "inherit", "textDecoration": "none"}),
            html.Div([
                dcc.Link("Home", href="/", style={"marginRight": "1rem", "color": "inherit"}),
                dcc.Link("Exchange Rates", href="/exchange", style={"marginRight": "1rem", "color": "inherit"}),
                dcc.Link("About", href="/about", style={"marginRight": "1rem", "color": "inherit"}),
                dcc.Link("Error Page", href="/error", style={"marginRight": "1rem", "color": "inherit"}),
                dcc.Dropdown(
                    id="display-currency-select",
                    options=[{"label": c, "value": c} for c in settings.supported_currencies],
                    value=settings.default_display_currency,
                    clearable=False,
                    style={"width": "100px", "color": "#1a1a2e"},
                ),
                html.Button("Dark", id="theme-toggle", n_clicks=0, style={"marginLeft": "1rem"}),
            ], style={"display": "flex", "alignItems": "center"}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style=nav_style(False)),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
], style=page_style(False))


@callback(
    Output("display-config", "data"),
    [Input("display-currency-select", "value"), Input("theme-toggle", "n_clicks")],
    State("display-config", "data"),
)
def update_display_config(display_currency, theme_clicks, config):
    config = dict(config or {})
    config["base_currency"] = config.get("base_currency") or settings.base_currency
    config["display_currency"] = display_currency or settings.base_currency
    config["dark_mode"] = bool((theme_clicks or 0) % 2)
    return config


@callback(
    [Output("theme-root", "style"), Output("nav-bar", "style"), Output("theme-toggle", "children")],
    Input("display-config", "data"),
)
def apply_theme(config):
    dark = bool((config or {}).get("dark_mode"))
    return page_style(dark), nav_style(dark), "Light" if dark else "Dark"


@callback(
    Output("rates-store", "data"),
    Input("display-config", "data"),
    State("rates-store", "data"),
)
def refresh_rates(config, current):
    """Fetch rates when the base currency changes; keep the current table otherwise."""
    base = (config or {}).get("base_currency") or settings.base_currency
    current = current or {"base_currency": None, "rates": {}}
    if current.get("base_currency") == base and current.get("rates"):
        return current

    try:
        resp = httpx.get(f"{settings.api_base_url}/api/v1/rates/{base}", timeout=20.0)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Rate lookup via API failed for %s: %s", base, e)
        return current

    if not data.get("available"):
        return current
    return {"base_currency": data["base_currency"], "rates": data["rates"]}


if __name__ == "__main__":
    app.run(debug=settings.debug, port=8050)
