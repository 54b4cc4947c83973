"""
agorava_core.constants

Framework-wide constants shared by validators, settings and services.
"""

from __future__ import annotations

# OAuth 1.0a "out-of-band" callback: the provider displays a verifier instead of redirecting.
OUT_OF_BAND = "oob"

DEFAULT_VALIDATION_MESSAGE = "Received an invalid parameter"
