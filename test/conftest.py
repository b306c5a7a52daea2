"""
Pytest configuration and fixtures for form field tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from formfields.cells.registry import build_default_registry  # noqa: E402
from formfields.i18n.translator import Translator  # noqa: E402
from formfields.schemas.table import ColumnDefinition, TableFieldConfig  # noqa: E402


@pytest.fixture(scope="session")
def app():
    from main import create_app

    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registry():
    """A fresh registry so tests can register handlers without leaking."""
    return build_default_registry(["http", "https"])


@pytest.fixture
def translator():
    return Translator("en")


@pytest.fixture
def contact_columns():
    return [
        ColumnDefinition(id="col1", handle="name", heading="Name", type="singleline"),
        ColumnDefinition(id="col2", handle="email", heading="Email", type="email"),
        ColumnDefinition(id="col3", handle="website", heading="Website", type="url"),
        ColumnDefinition(id="col4", handle="colour", heading="Colour", type="color"),
        ColumnDefinition(id="col5", handle="born", heading="Born", type="date"),
    ]


@pytest.fixture
def contacts_settings():
    """Table settings as the form builder posts them."""
    return {
        "handle": "contacts",
        "label": "Field",
        "columns": [
            {"id": "col1", "heading": "Name", "handle": "name", "type": "singleline"},
            {"id": "col2", "heading": "Email", "handle": "email", "type": "email"},
        ],
        "minRows": 2,
        "maxRows": 4,
    }


@pytest.fixture
def contacts_config(contacts_settings):
    return TableFieldConfig.model_validate(contacts_settings)
