import dash
from dash import html

dash.register_page(__name__, path="/error", name="Error")

layout = html.H3("An error occurred. Please try again later.", style={"margin": "1.5rem 0"})
