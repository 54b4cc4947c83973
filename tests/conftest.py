"""
tests.conftest

Shared fixtures: a sample provider service and a clean settings cache.
"""

from __future__ import annotations

import pytest

from agorava_core.services.social_network import SocialNetworkService
from agorava_core.settings import get_settings


class ExampleService(SocialNetworkService):
    def __init__(self, root: str = "https://api.x.com") -> None:
        self._root = root

    def get_api_root_url(self) -> str:
        return self._root


@pytest.fixture
def service() -> ExampleService:
    return ExampleService()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_service():
    return ExampleService
