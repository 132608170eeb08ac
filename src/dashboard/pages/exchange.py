"""Exchange rate page — the table currently held for the base currency."""

import dash
from dash import html, callback, Input, Output

from src.config import settings
from src.dashboard.components import rates_table, table_from_store

dash.register_page(__name__, path="/exchange", name="Exchange Rates")

layout = html.Div([
    html.H2("Exchange Rates"),
    html.Div(id="exchange-rates-table"),
])


@callback(
    Output("exchange-rates-table", "children"),
    Input("rates-store", "data"),
)
def render_rates(rates):
    return rates_table(table_from_store(rates), settings.supported_currencies)
