"""CSS styles for the console app.

Hides layout and styling decisions from the application logic. The console
view draws its own borders, so it gets the full pane; the log panel docks
beside it when enabled.
"""

APP_CSS = """
Screen {
    layout: horizontal;
    background: $background;
}

#console {
    width: 1fr;
    height: 100%;
    background: $surface;
}

#debug-panel {
    display: none;
    width: 40%;
    height: 100%;
    background: $panel;
    border: round $warning 50%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-size-vertical: 1;
}
"""
