"""
agorava_core.api

Public API contracts used by provider adapters.

Responsibilities:
- Argument preconditions (`api.preconditions`).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package may depend on `services` or `settings`.
