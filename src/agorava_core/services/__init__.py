"""
agorava_core.services

Base classes for provider-specific services.

Responsibilities:
- Resolve provider-relative paths against an API root (`services.social_network`).
"""

# Package marker.
