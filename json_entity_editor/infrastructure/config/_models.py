# json_entity_editor/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load
from logging import getLogger
from pathlib import Path
from typing import Self

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import model_validator

# Local imports
from json_entity_editor.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "json_entity_editor.json"

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class ThemeConfig(BaseModel):
    """Display colors handed to a presentation layer

    Partial themes are merged onto these defaults field by field.
    """

    primary_color: str = Field("#3498db", pattern=HEX_COLOR_PATTERN)
    secondary_color: str = Field("#2ecc71", pattern=HEX_COLOR_PATTERN)
    background_color: str = Field("#ffffff", pattern=HEX_COLOR_PATTERN)
    text_color: str = Field("#333333", pattern=HEX_COLOR_PATTERN)
    border_color: str = Field("#cccccc", pattern=HEX_COLOR_PATTERN)
    warning_color: str = Field(
        "#fff3cd", pattern=HEX_COLOR_PATTERN, description="Duplicate key warnings"
    )
    error_color: str = Field("#f8d7da", pattern=HEX_COLOR_PATTERN)


class SizeBounds(BaseModel):
    """Optional size bounds of the editor area, in pixels"""

    min_width: int | None = Field(None, gt=0)
    max_width: int | None = Field(None, gt=0)
    min_height: int | None = Field(None, gt=0)
    max_height: int | None = Field(None, gt=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        """Ensure each minimum does not exceed its maximum"""
        for low, high in (("min_width", "max_width"), ("min_height", "max_height")):
            low_value = getattr(self, low)
            high_value = getattr(self, high)
            if low_value is not None and high_value is not None and low_value > high_value:
                raise ValueError(f"{low} ({low_value}) cannot exceed {high} ({high_value})")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class EditorConfig(BaseModel):
    """Root editor configuration model"""

    allow_parent_deletion: bool = Field(
        False, description="Allow retyping a container that still has children"
    )
    container_root_only: bool = Field(
        False, description="Require the root entity to be an object or array"
    )
    indent: int = Field(2, ge=0, le=8, description="Spaces per level in extracted JSON")
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    size: SizeBounds = Field(default_factory=SizeBounds)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "EditorConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file, None to look for
                json_entity_editor.json in the current directory

        Returns:
            Validated EditorConfig instance; defaults if the file is missing
            or invalid
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to a plain dictionary"""
        return self.model_dump()
