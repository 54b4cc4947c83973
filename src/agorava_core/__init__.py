"""
agorava_core

Core contracts shared by Agorava provider adapters.

Responsibilities:
- Re-export the types adapters build on: preconditions, `UserProfile`, `SocialNetworkService`.
- Expose package version metadata.
"""

from agorava_core.api.preconditions import InvalidArgumentError
from agorava_core.services.social_network import SocialNetworkService
from agorava_core.spi.user_profile import UserProfile

__all__ = ["InvalidArgumentError", "SocialNetworkService", "UserProfile", "__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# `settings` is left out on purpose: adapters depend on the contracts, hosts own configuration.
