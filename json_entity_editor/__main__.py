#!/usr/bin/env python3
"""
JSON Entity Editor - Main Entry Point

This module allows the package to be run as a script:
    python -m json_entity_editor
"""

# Standard library imports
from sys import exit

# Local imports
from json_entity_editor.adapters.cli.main import main

if __name__ == "__main__":
    exit(main())
