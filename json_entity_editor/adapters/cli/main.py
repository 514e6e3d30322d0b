# json_entity_editor/adapters/cli/main.py

"""
JSON Entity Editor - CLI Main Module

Reads JSON text into an edit session, warns about duplicate keys and prints
the canonical rendering. Nothing is ever written back to disk.
"""

# Standard library imports
from json import dumps
from logging import getLogger
from sys import stdin
from time import time

# Local imports
from json_entity_editor.adapters.cli.parser import MAX_INDENT
from json_entity_editor.adapters.cli.parser import create_argument_parser
from json_entity_editor.application.services import EditSession
from json_entity_editor.core.domain.conversion import dump_entity
from json_entity_editor.core.domain.errors import InvalidTransition
from json_entity_editor.core.domain.errors import JSONTextError
from json_entity_editor.core.domain.errors import SerializationError
from json_entity_editor.core.types.json import EntityPath
from json_entity_editor.infrastructure.config import get_config
from json_entity_editor.infrastructure.logging import log_document_summary
from json_entity_editor.infrastructure.logging import setup_logging as set_up_logging

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_DUPLICATE_KEYS = 1
EXIT_BAD_INPUT = 2


def format_path(path: EntityPath) -> str:
    """Render a position path as ``$[0][2]``"""
    return "$" + "".join(f"[{index}]" for index in path)


def read_input(source: str) -> str:
    """Read JSON text from a file path, or stdin for ``-``"""
    if source == "-":
        return stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point

    Returns:
        Exit status: 0 on success, 1 for duplicate keys, 2 for unreadable
        or malformed input
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.indent is not None and not 0 <= args.indent <= MAX_INDENT:
        parser.error(f"--indent must be between 0 and {MAX_INDENT}")

    config = get_config(args.config)
    log_file = args.log_file or config.logging.log_file
    log_level = args.log_level or ("DEBUG" if config.logging.debug else "INFO")
    set_up_logging(
        log_file=log_file,
        log_level=log_level,
        silent=args.silent,
        disable_file_logging=log_file is None and not args.log_to_file,
    )

    editor_config = config.editor
    if args.indent is not None:
        editor_config = editor_config.model_copy(update={"indent": args.indent})

    source = "<stdin>" if args.input == "-" else args.input
    start_time = time()

    try:
        text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {source}: {e}")
        return EXIT_BAD_INPUT

    session = EditSession(config=editor_config)
    try:
        session.initialize_text(text)
    except (JSONTextError, InvalidTransition) as e:
        logger.error(f"{source}: {e}")
        return EXIT_BAD_INPUT

    log_document_summary(source, session.root, start_time, time())

    for path, keys in session.duplicate_warnings():
        logger.warning(f"Duplicate keys at {format_path(path)}: {', '.join(keys)}")

    if args.dump_entity:
        print(dumps(dump_entity(session.root), indent=editor_config.indent, ensure_ascii=False))
        return EXIT_OK

    try:
        rendered = session.extract()
    except SerializationError as e:
        logger.error(f"{source}: cannot serialize object at {format_path(e.path)}: {e}")
        return EXIT_DUPLICATE_KEYS

    if not args.check:
        print(rendered)
    return EXIT_OK
