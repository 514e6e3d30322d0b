# json_entity_editor/application/services/__init__.py

"""Application services"""

# Local imports
from json_entity_editor.application.services._edit_session import ChangeListener
from json_entity_editor.application.services._edit_session import EditSession
from json_entity_editor.application.services._edit_session import ExtractListener

__all__ = ["ChangeListener", "EditSession", "ExtractListener"]
