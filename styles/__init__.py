"""Shared style constants for dirplay."""

COLORS = {
    "primary": "#ff8c00",
    "highlight": "#ffb347",
    "directory": "#00bcd4",
    "muted": "#888888",
    "dim": "#555555",
}

COLOR_PRIMARY = COLORS["primary"]
COLOR_HIGHLIGHT = COLORS["highlight"]
COLOR_DIRECTORY = COLORS["directory"]
COLOR_MUTED = COLORS["muted"]
COLOR_DIM = COLORS["dim"]
