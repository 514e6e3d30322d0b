# json_entity_editor/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from json_entity_editor.infrastructure.config import ConfigLoader
from json_entity_editor.infrastructure.config import EditorConfig
from json_entity_editor.infrastructure.config import get_config

__all__ = ["ConfigLoader", "EditorConfig", "get_config"]
