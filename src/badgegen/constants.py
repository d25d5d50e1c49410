"""Base endpoints of the shields.io badge service."""

# Dash-based API: append LABEL-MESSAGE-COLOR as a path segment.
SHIELDS_BADGE = "https://img.shields.io/badge"

# Param-based API: pass label, message and color as query params.
SHIELDS_STATIC = "https://img.shields.io/static/v1"

LARGE_STYLE = "for-the-badge"
