# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from json_entity_editor.core.domain.conversion import parse_json_text
from json_entity_editor.core.domain.entity import ArrayEntity
from json_entity_editor.core.domain.entity import FloatEntity
from json_entity_editor.core.domain.entity import IntegerEntity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import StringEntity
from json_entity_editor.infrastructure.config import _loader as config_loader


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(monkeypatch):
    """Minimal isolation for most tests - reset logging and the default config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(30)  # WARNING level

    monkeypatch.setattr(config_loader, "_default_config", None)

    yield

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def person_entity():
    """Object entity for ``{"name": "Ada", "born": 1815, "tags": ["math", 1.5]}``"""
    return ObjectEntity(
        children=(
            ("name", StringEntity(value="Ada")),
            ("born", IntegerEntity(value=1815)),
            (
                "tags",
                ArrayEntity(children=(StringEntity(value="math"), FloatEntity(value=1.5))),
            ),
        )
    )


@pytest.fixture
def duplicate_key_entity():
    """Object entity whose keys are ``x, y, x``"""
    return ObjectEntity(
        children=(
            ("x", IntegerEntity(value=1)),
            ("y", IntegerEntity(value=2)),
            ("x", IntegerEntity(value=3)),
        )
    )


@pytest.fixture
def nested_duplicate_entity():
    """Valid root holding a nested object with a repeated key at position 1"""
    return parse_json_text('{"ok": true, "inner": {"a": 1, "b": 2, "a": 3}}')
