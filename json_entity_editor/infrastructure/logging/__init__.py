# json_entity_editor/infrastructure/logging/__init__.py

"""Logging infrastructure for the JSON entity editor.

This module provides centralized logging configuration and setup.
"""

# Local imports
from json_entity_editor.infrastructure.logging._setup import get_default_log_path
from json_entity_editor.infrastructure.logging._setup import log_document_summary
from json_entity_editor.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path", "log_document_summary"]
