# json_entity_editor/application/models/__init__.py

"""Application-level result models"""

# Local imports
from json_entity_editor.application.models.extraction_result import ExtractionResult

__all__ = ["ExtractionResult"]
