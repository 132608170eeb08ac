import dash
from dash import html

dash.register_page(__name__, path="/about", name="About")

layout = html.Div([
    html.H2("About"),
    html.P(
        "Computes a fixed-rate, equal-installment loan schedule in the base currency "
        "and shows it in the currency picked in the navigation bar using live exchange rates."
    ),
    html.P("When a rate cannot be fetched, figures are shown in the base currency and labelled as such."),
])
