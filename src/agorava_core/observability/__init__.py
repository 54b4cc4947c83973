"""
agorava_core.observability

Observability package.

Responsibilities:
- Structured logging setup.
"""

# Package marker.
