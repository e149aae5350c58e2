"""Shared fixtures for the html_to_ricos test suite."""

import pytest
from bs4 import BeautifulSoup

from html_to_ricos import counter_ids
from html_to_ricos.context import ConversionContext


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - HTTP and full pipeline tests")


@pytest.fixture
def ctx():
    """Conversion context with sequential ids (n1, n2, ...)."""
    return ConversionContext(ids=counter_ids())


@pytest.fixture
def parse():
    """Parse markup verbatim (html.parser keeps malformed nesting as written)."""
    def _parse(markup):
        return BeautifulSoup(markup, 'html.parser')
    return _parse

