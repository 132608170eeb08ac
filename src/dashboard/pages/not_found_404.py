import dash
from dash import html

dash.register_page(__name__)

layout = html.H2("404 - Page Not Found", style={"margin": "1.5rem 0"})
