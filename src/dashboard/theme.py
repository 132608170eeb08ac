"""Light/dark palettes for the dashboard."""

LIGHT = {"background": "#ffffff", "text": "#1a1a2e", "nav": "#1a1a2e", "nav_text": "white", "grid": "#e5e5e5"}
DARK = {"background": "#121212", "text": "#e0e0e0", "nav": "#0f3460", "nav_text": "white", "grid": "#333333"}


def palette(dark: bool) -> dict:
    return DARK if dark else LIGHT


def page_style(dark: bool) -> dict:
    p = palette(dark)
    return {"backgroundColor": p["background"], "color": p["text"], "minHeight": "100vh"}


def nav_style(dark: bool) -> dict:
    p = palette(dark)
    return {
        "backgroundColor": p["nav"],
        "color": p["nav_text"],
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }
