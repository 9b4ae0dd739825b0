# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from companies_api.config.settings import get_settings
from companies_api.dependencies.companies import get_xml_api_settings
from companies_api.infrastructure.logging.logger import clear_request_context

COMPANY_1_XML = (
    "<Data><id>1</id><name>MWNZ</name><description>..is awesome</description></Data>"
)
COMPANY_2_XML = (
    "<Data><id>2</id><name>Other</name><description>....is not</description></Data>"
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test default settings and a clean request context."""
    for name in ("XML_API_BASE_URL", "XML_API_TIMEOUT_S", "ALLOWED_ORIGINS", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_xml_api_settings.cache_clear()
    clear_request_context()
    yield
    get_settings.cache_clear()
    get_xml_api_settings.cache_clear()
    clear_request_context()


@pytest.fixture
def company_1_xml() -> str:
    return COMPANY_1_XML


@pytest.fixture
def company_2_xml() -> str:
    return COMPANY_2_XML
