# json_entity_editor/application/services/_edit_session.py

"""Edit session holding the current root entity"""

# Standard library imports
from logging import getLogger
from typing import Callable

# Local imports
from json_entity_editor.application.models.extraction_result import ExtractionResult
from json_entity_editor.core.domain.conversion import from_json
from json_entity_editor.core.domain.conversion import parse_json_text
from json_entity_editor.core.domain.conversion import to_json
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import is_container
from json_entity_editor.core.domain.entity import is_entity
from json_entity_editor.core.domain.enums import EntityKind
from json_entity_editor.core.domain.errors import InvalidTransition
from json_entity_editor.core.domain.errors import JSONTextError
from json_entity_editor.core.domain.errors import SerializationError
from json_entity_editor.core.domain.operations import retype
from json_entity_editor.core.domain.paths import find_duplicate_keys
from json_entity_editor.core.domain.paths import update_at_path
from json_entity_editor.core.types.json import EntityPath
from json_entity_editor.core.types.json import NativeValue
from json_entity_editor.infrastructure.config import EditorConfig

logger = getLogger(__name__)

type ChangeListener = Callable[[Entity], None]
type ExtractListener = Callable[[ExtractionResult], None]


class EditSession:
    """Sole mutable holder of the entity tree being edited

    Every edit replaces the root wholesale with a new entity. Change
    listeners receive the new root after ``apply_edit``, ``edit_at``,
    ``retype_at`` and ``reset``; seeding with ``initialize`` does not count
    as an edit. Extract listeners receive a fresh ``ExtractionResult`` after
    every replacement, seeding included.
    An exception from a change listener reaches the caller only after the
    extract listeners have run; the new root stays in place.
    """

    def __init__(
        self,
        seed: Entity | NativeValue | None = None,
        config: EditorConfig | None = None,
    ):
        """Initialize the session

        Args:
            seed: Entity or native JSON value to start from; None starts from
                an empty object
            config: Editor configuration, defaults if None
        """
        self._config = config or EditorConfig()
        self._listeners: list[ChangeListener] = []
        self._extract_listeners: list[ExtractListener] = []
        self._root: Entity = ObjectEntity()
        if seed is not None:
            self.initialize(seed)

    @property
    def root(self) -> Entity:
        """The current root entity"""
        return self._root

    @property
    def config(self) -> EditorConfig:
        return self._config

    # -- Seeding --------------------------------------------------------

    def initialize(self, seed: Entity | NativeValue) -> Entity:
        """Replace the root with ``seed``

        Native values are converted with ``from_json``, so ``None`` becomes
        the string entity ``"null"``.

        Raises:
            InvalidTransition: If the config requires a container root and
                the seed is a scalar
        """
        root = seed if is_entity(seed) else from_json(seed)
        self._replace_root(root, notify=False)
        return root

    def initialize_text(self, text: str) -> Entity:
        """Parse JSON text, keeping duplicate keys, and use it as the root

        Raises:
            JSONTextError: If the text is malformed; the root is unchanged
        """
        try:
            root = parse_json_text(text)
        except JSONTextError as e:
            logger.warning(f"Ignoring invalid JSON text: {e}")
            raise
        return self.initialize(root)

    # -- Edits ----------------------------------------------------------

    def apply_edit(self, new_root: Entity) -> None:
        """Replace the root with an already edited tree and notify listeners"""
        self._replace_root(new_root, notify=True)

    def edit_at(self, path: EntityPath, fn: Callable[[Entity], Entity]) -> Entity:
        """Apply ``fn`` to the entity at ``path`` and commit the new root

        Returns:
            The new root

        Raises:
            IndexOutOfRange: If ``path`` is stale
            InvalidTransition: If ``path`` crosses a scalar or ``fn`` refuses
        """
        new_root = update_at_path(self._root, path, fn)
        self.apply_edit(new_root)
        return new_root

    def retype_at(self, path: EntityPath, kind: EntityKind | str) -> Entity:
        """Retype the entity at ``path`` using the configured strictness"""
        allow = self._config.allow_parent_deletion
        return self.edit_at(path, lambda entity: retype(entity, kind, allow_non_empty=allow))

    def reset(self) -> None:
        """Start over from an empty object"""
        self._replace_root(ObjectEntity(), notify=True)

    # -- Extraction -----------------------------------------------------

    def extract(self) -> str:
        """JSON text of the current root

        Raises:
            SerializationError: If any object has duplicate keys
        """
        return to_json(self._root, indent=self._config.indent)

    def try_extract(self) -> ExtractionResult:
        """Like ``extract`` but reports duplicate keys in the result"""
        try:
            return ExtractionResult.success(self.extract())
        except SerializationError as e:
            return ExtractionResult.failure(e)

    def duplicate_warnings(self) -> list[tuple[EntityPath, list[str]]]:
        """Objects in the tree whose keys repeat, as ``(path, keys)``"""
        return find_duplicate_keys(self._root)

    # -- Listeners ------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it"""
        self._listeners.append(listener)
        return lambda: self._remove(self._listeners, listener)

    def subscribe_extract(self, listener: ExtractListener) -> Callable[[], None]:
        """Register an extract listener; returns a function that removes it"""
        self._extract_listeners.append(listener)
        return lambda: self._remove(self._extract_listeners, listener)

    @staticmethod
    def _remove(listeners: list, listener: object) -> None:
        if listener in listeners:
            listeners.remove(listener)

    def _replace_root(self, new_root: Entity, notify: bool) -> None:
        if self._config.container_root_only and not is_container(new_root):
            logger.warning(f"Rejected {new_root.kind} root: container root required")
            raise InvalidTransition(f"Root must be an object or array, not {new_root.kind}")

        self._root = new_root
        logger.debug(f"Root replaced with {new_root.kind} entity")

        # Extract listeners run even if a change listener raises
        try:
            if notify:
                for listener in list(self._listeners):
                    listener(new_root)
        finally:
            self._notify_extract()

    def _notify_extract(self) -> None:
        if not self._extract_listeners:
            return
        result = self.try_extract()
        if not result.ok:
            logger.debug(f"Extraction failed: {result.error}")
        for extract_listener in list(self._extract_listeners):
            extract_listener(result)
