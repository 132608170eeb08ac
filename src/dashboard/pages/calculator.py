"""Loan EMI calculator page.

The schedule is computed once in the base currency and stored; switching the
display currency only re-renders the projection.
"""

from decimal import Decimal, InvalidOperation

import dash
from dash import html, dcc, callback, Input, Output, State, no_update

from src.dashboard.components import (
    balance_figure,
    result_from_store,
    result_to_store,
    schedule_table,
    summary_block,
    table_from_store,
)
from src.engine.conversion import convert_result
from src.engine.debt import amortization_schedule
from src.models.loan import InvalidLoanParameters, LoanParameters
from src.models.rates import DisplayConfig

dash.register_page(__name__, path="/", name="Calculator")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


layout = html.Div([
    html.H2("Loan EMI Calculator"),
    dcc.Store(id="amortization-store"),

    html.Div([
        _field("Principal Amount", dcc.Input(id="loan-principal", type="number", min=0, placeholder="120000", style=FIELD_STYLE)),
        _field("Interest Rate (Annual %)", dcc.Input(id="loan-rate", type="number", min=0, step=0.01, placeholder="9.25", style=FIELD_STYLE)),
        _field("Loan Duration (Months)", dcc.Input(id="loan-months", type="number", min=1, step=1, placeholder="12", style=FIELD_STYLE)),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
    html.Div([
        html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
        html.Button("Reset", id="reset-btn", n_clicks=0, style={**BTN_STYLE, "backgroundColor": "#888"}),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "1.5rem"}),

    html.Div(id="calculator-error", style={"color": "#e94560"}),
    html.Div(id="calculator-results"),
])


@callback(
    [
        Output("amortization-store", "data"),
        Output("calculator-error", "children"),
        Output("loan-principal", "value"),
        Output("loan-rate", "value"),
        Output("loan-months", "value"),
    ],
    [Input("calculate-btn", "n_clicks"), Input("reset-btn", "n_clicks")],
    [State("loan-principal", "value"), State("loan-rate", "value"), State("loan-months", "value")],
    prevent_initial_call=True,
)
def calculate(calc_clicks, reset_clicks, principal, rate, months):
    if dash.ctx.triggered_id == "reset-btn":
        return None, "", None, None, None

    if principal is None or rate is None or months is None:
        return no_update, "Enter principal, interest rate and duration.", no_update, no_update, no_update
    try:
        if float(months) != int(months):
            raise InvalidLoanParameters("term_months must be a whole number of months")
        params = LoanParameters(
            principal=Decimal(str(principal)),
            annual_rate_percent=Decimal(str(rate)),
            term_months=int(months),
        )
    except (InvalidLoanParameters, InvalidOperation, ValueError) as e:
        return None, f"Invalid input: {e}", no_update, no_update, no_update

    return result_to_store(amortization_schedule(params)), "", no_update, no_update, no_update


@callback(
    Output("calculator-results", "children"),
    [
        Input("amortization-store", "data"),
        Input("display-config", "data"),
        Input("rates-store", "data"),
    ],
)
def render_results(stored, config, rates):
    if not stored:
        return None

    config = config or {}
    result = result_from_store(stored)
    display_config = DisplayConfig(
        base_currency=config.get("base_currency") or result.base_currency,
        display_currency=config.get("display_currency") or result.base_currency,
        dark_mode=bool(config.get("dark_mode")),
    )
    display = convert_result(result, display_config, table_from_store(rates))

    return html.Div([
        summary_block(display),
        dcc.Graph(figure=balance_figure(display, dark=display_config.dark_mode)),
        schedule_table(display),
    ])
