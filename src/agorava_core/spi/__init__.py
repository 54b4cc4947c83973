"""
agorava_core.spi

Service provider interface: abstract types implemented by per-network adapters.
"""

from agorava_core.spi.user_profile import UserProfile

__all__ = ["UserProfile"]
