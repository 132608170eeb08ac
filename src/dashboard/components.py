"""Rendering helpers shared by dashboard pages.

Kept free of page registration so they can be imported without a running app.
"""

from decimal import Decimal

import plotly.graph_objects as go
from dash import html

from src.engine.conversion import format_money
from src.models.loan import AmortizationResult, AmortizationRow
from src.models.rates import DisplaySchedule, ExchangeRateTable
from src.dashboard.theme import palette

CELL_STYLE = {"padding": "0.4rem 0.75rem", "textAlign": "right", "borderBottom": "1px solid #ccc"}
HEAD_STYLE = {**CELL_STYLE, "fontWeight": "bold"}


# ---------------------------------------------------------------------------
# dcc.Store round trip (JSON only holds strings/numbers)
# ---------------------------------------------------------------------------


def result_to_store(result: AmortizationResult) -> dict:
    return {
        "installment_amount": str(result.installment_amount),
        "total_interest": str(result.total_interest),
        "total_payment": str(result.total_payment),
        "base_currency": result.base_currency,
        "schedule": [
            [row.period, str(row.principal_portion), str(row.interest_portion), str(row.remaining_balance)]
            for row in result.schedule
        ],
    }


def result_from_store(data: dict) -> AmortizationResult:
    return AmortizationResult(
        installment_amount=Decimal(data["installment_amount"]),
        schedule=[
            AmortizationRow(
                period=int(period),
                principal_portion=Decimal(principal),
                interest_portion=Decimal(interest),
                remaining_balance=Decimal(balance),
            )
            for period, principal, interest, balance in data["schedule"]
        ],
        total_interest=Decimal(data["total_interest"]),
        total_payment=Decimal(data["total_payment"]),
        base_currency=data["base_currency"],
    )


def table_from_store(data: dict | None) -> ExchangeRateTable | None:
    if not data or not data.get("base_currency") or not data.get("rates"):
        return None
    return ExchangeRateTable(
        base_currency=data["base_currency"],
        rates={code: Decimal(str(rate)) for code, rate in data["rates"].items()},
    )


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


def summary_block(display: DisplaySchedule) -> html.Div:
    children = [
        html.H3(f"Monthly EMI: {format_money(display.installment_amount, display.currency)}"),
        html.P(f"Total interest: {format_money(display.total_interest, display.currency)}"),
        html.P(f"Total payment: {format_money(display.total_payment, display.currency)}"),
    ]
    if display.requested_currency != display.currency:
        children.append(html.P(
            f"{display.requested_currency} rate unavailable; amounts shown in {display.currency}.",
            style={"color": "#e94560"},
        ))
    return html.Div(children)


def schedule_table(display: DisplaySchedule) -> html.Table:
    header = html.Tr([
        html.Th("Month", style=HEAD_STYLE),
        html.Th("Principal", style=HEAD_STYLE),
        html.Th("Interest", style=HEAD_STYLE),
        html.Th("Remaining Balance", style=HEAD_STYLE),
    ])
    body = [
        html.Tr([
            html.Td(row.period, style=CELL_STYLE),
            html.Td(format_money(row.principal_portion, display.currency), style=CELL_STYLE),
            html.Td(format_money(row.interest_portion, display.currency), style=CELL_STYLE),
            html.Td(format_money(row.remaining_balance, display.currency), style=CELL_STYLE),
        ])
        for row in display.rows
    ]
    return html.Table([html.Thead(header), html.Tbody(body)], style={"width": "100%", "borderCollapse": "collapse"})


def balance_figure(display: DisplaySchedule, dark: bool = False) -> go.Figure:
    p = palette(dark)
    periods = [row.period for row in display.rows]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=periods, y=[float(r.principal_portion) for r in display.rows], name="Principal",
    ))
    fig.add_trace(go.Bar(
        x=periods, y=[float(r.interest_portion) for r in display.rows], name="Interest",
    ))
    fig.add_trace(go.Scatter(
        x=periods, y=[float(r.remaining_balance) for r in display.rows],
        name="Balance", yaxis="y2", mode="lines",
    ))
    fig.update_layout(
        barmode="stack",
        title=f"Payment split and balance ({display.currency})",
        xaxis_title="Month",
        yaxis={"title": "Payment", "gridcolor": p["grid"]},
        yaxis2={"title": "Balance", "overlaying": "y", "side": "right", "showgrid": False},
        paper_bgcolor=p["background"],
        plot_bgcolor=p["background"],
        font={"color": p["text"]},
        legend={"orientation": "h"},
    )
    return fig


def rates_table(table: ExchangeRateTable | None, currencies: list[str] | None = None) -> html.Div:
    if table is None:
        return html.P("Exchange rates are unavailable right now.")
    codes = currencies or sorted(table.rates)
    rows = [
        html.Tr([html.Td(code, style=CELL_STYLE), html.Td(f"{table.rates[code]}", style=CELL_STYLE)])
        for code in codes
        if code in table.rates
    ]
    return html.Div([
        html.P(f"Units per 1 {table.base_currency}"),
        html.Table([
            html.Thead(html.Tr([html.Th("Currency", style=HEAD_STYLE), html.Th("Rate", style=HEAD_STYLE)])),
            html.Tbody(rows),
        ], style={"borderCollapse": "collapse"}),
    ])
