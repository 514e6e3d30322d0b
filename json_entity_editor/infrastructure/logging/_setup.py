# json_entity_editor/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from collections import Counter
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import exists

# Local imports
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.paths import find_duplicate_keys
from json_entity_editor.core.domain.paths import iter_entities


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp"""
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/json_entity_editor_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    # Configure root logger
    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    # Console gets abbreviated records, file gets the logger name too
    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        logger = getLogger(__name__)
        logger.info(f"Logging to file: {log_file}")

        return log_file

    return None


def log_document_summary(source: str, root: Entity, start_time: float, end_time: float) -> None:
    """Log a summary of a loaded document

    Args:
        source: Where the document came from (file path or "<stdin>")
        root: Root entity of the document
        start_time: Processing start time
        end_time: Processing end time
    """
    logger = getLogger(__name__)

    kinds = Counter(entity.kind for _, entity in iter_entities(root))
    duplicates = find_duplicate_keys(root)
    elapsed_ms = (end_time - start_time) * 1000

    summary_lines = [
        f"Document: {source}",
        f"Root kind: {root.kind}",
        f"Entities: {sum(kinds.values()):,}",
    ]
    summary_lines.extend(f"  {kind}: {count:,}" for kind, count in sorted(kinds.items()))
    summary_lines.append(f"Objects with duplicate keys: {len(duplicates):,}")
    summary_lines.append(f"Processing time: {elapsed_ms:.1f}ms")

    logger.info("\n".join(summary_lines))
