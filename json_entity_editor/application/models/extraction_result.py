# json_entity_editor/application/models/extraction_result.py

"""Outcome of extracting JSON text from the current root"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from json_entity_editor.core.domain.errors import SerializationError
from json_entity_editor.core.types.json import EntityPath


class ExtractionResult(BaseModel):
    """Either the extracted JSON text or the reason it could not be produced"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    json_text: str | None = Field(None, alias="json", description="Extracted JSON text")
    error: str | None = Field(None, description="Failure message, e.g. duplicate keys")
    duplicate_keys: tuple[str, ...] = ()
    error_path: EntityPath | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "ExtractionResult":
        return cls(json=text)

    @classmethod
    def failure(cls, error: SerializationError) -> "ExtractionResult":
        return cls(
            error=str(error),
            duplicate_keys=tuple(error.duplicate_keys),
            error_path=error.path,
        )
