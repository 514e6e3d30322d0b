# json_entity_editor/infrastructure/config/_loader.py

"""Configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from json_entity_editor.core.types.json import JSONDict
from json_entity_editor.infrastructure.config._models import EditorConfig
from json_entity_editor.infrastructure.config._models import LoggingConfig
from json_entity_editor.infrastructure.config._models import SizeBounds
from json_entity_editor.infrastructure.config._models import ThemeConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing the validated editor configuration"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._editor_config = EditorConfig.load(config_path)
        logger.debug(f"Loaded editor configuration from {config_path or 'defaults'}")

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._editor_config.to_dict()

    @property
    def editor(self) -> EditorConfig:
        """The validated configuration model"""
        return self._editor_config

    @property
    def theme(self) -> ThemeConfig:
        """Theme colors"""
        return self._editor_config.theme

    @property
    def size(self) -> SizeBounds:
        """Editor size bounds"""
        return self._editor_config.size

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._editor_config.logging

    @property
    def allow_parent_deletion(self) -> bool:
        return self._editor_config.allow_parent_deletion

    @property
    def indent(self) -> int:
        return self._editor_config.indent


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
