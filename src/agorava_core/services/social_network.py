"""
agorava_core.services.social_network

Base class for provider services that call a REST API.

Responsibilities:
- Resolve provider-relative paths against the provider's API root.
- Append query parameters from a single key/value, a mapping, or a parameter object.

No I/O happens here; the resulting strings are handed to whatever HTTP layer the adapter uses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from agorava_core.observability.logging import get_logger
from agorava_core.utils import url as url_utils

log = get_logger(__name__)


class SocialNetworkService(ABC):
    """
    Provider services subclass this and supply `get_api_root_url`, e.g.
    `"https://api.twitter.com/1.1"`.
    """

    @abstractmethod
    def get_api_root_url(self) -> str: ...

    def build_uri(
        self,
        url: str,
        params: str | Mapping[str, Any] | object | None = None,
        value: Any = None,
    ) -> str:
        """
        - `build_uri("/users")` -> root + "/users"
        - `build_uri("/users", "q", "a b")` -> root + "/users?q=a%20b"
        - `build_uri("/users", {"a": 1, "b": 2})` -> root + "/users?a=1&b=2"
        - `build_uri("/users", SearchParams(...))` -> fields in declared order, None skipped
        """

        # Plain concatenation: root and path slashes are the caller's convention.
        uri = self.get_api_root_url() + url
        if params is not None:
            uri = url_utils.build_uri(uri, params, value)
        log.debug("uri_built", service=type(self).__name__, uri=uri)
        return uri


# --- Module Notes -----------------------------------------------------------
# Instances carry no mutable state, so one service object can be shared across tasks.
