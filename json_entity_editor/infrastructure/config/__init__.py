# json_entity_editor/infrastructure/config/__init__.py

"""Configuration infrastructure for the JSON entity editor.

This module manages configuration loading, validation, and models.
"""

# Local imports
from json_entity_editor.infrastructure.config._loader import ConfigLoader
from json_entity_editor.infrastructure.config._loader import get_config
from json_entity_editor.infrastructure.config._models import DEFAULT_CONFIG_FILENAME
from json_entity_editor.infrastructure.config._models import EditorConfig
from json_entity_editor.infrastructure.config._models import LoggingConfig
from json_entity_editor.infrastructure.config._models import SizeBounds
from json_entity_editor.infrastructure.config._models import ThemeConfig

__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_FILENAME",
    "EditorConfig",
    "LoggingConfig",
    "SizeBounds",
    "ThemeConfig",
    "get_config",
]
