"""Application settings with Pydantic Settings validation.

Environment variables (and an optional .env file) take precedence.
Pipeline configuration is loaded from config/main.yaml and the other
config/*.yaml files, merged, and validated against JSON schemas in
config/schemas/ when present.
"""

import json
from pathlib import Path
from typing import Any, Final

import yaml
from jsonschema import ValidationError as JSONSchemaValidationError
from jsonschema import validate
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.exceptions import ConfigurationError
from contribution_scoring.domain.models import (
    BotDetectorConfig,
    ContentFilterConfig,
    ReadabilityScorerConfig,
    ScoringConfig,
    SlashCommandConfig,
    TechnicalScorerConfig,
)

CONFIG_DIR: Final[Path] = Path("config")
MAIN_CONFIG_NAME: Final[str] = "main"

SECTION_MODELS: Final[dict[str, type[BaseModel]]] = {
    "bot_detector": BotDetectorConfig,
    "slash_command": SlashCommandConfig,
    "content_filter": ContentFilterConfig,
    "readability": ReadabilityScorerConfig,
    "technical": TechnicalScorerConfig,
    "scoring": ScoringConfig,
}
"""YAML section name -> configuration model (same name as the Settings field)."""

logger = get_logger(__name__)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary to merge into base (takes precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_schema(schema_name: str, config_dir: Path = CONFIG_DIR) -> dict[str, Any]:
    """Load JSON Schema from config/schemas/.

    Args:
        schema_name: Schema name without extension (e.g., "main")
        config_dir: Configuration directory

    Returns:
        JSON Schema dictionary or empty dict if not found
    """
    schema_path = config_dir / "schemas" / f"{schema_name}.schema.json"
    if not schema_path.exists():
        return {}

    try:
        with open(schema_path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("config_schema_load_failed", schema=schema_name, error=str(e))
        return {}


def validate_config_section(
    config: dict[str, Any],
    schema_name: str,
    file_path: str = "",
    config_dir: Path = CONFIG_DIR,
) -> None:
    """Validate a config file against its JSON Schema.

    Args:
        config: Configuration dictionary to validate
        schema_name: Name of schema to validate against
        file_path: Optional file path for error messages
        config_dir: Configuration directory

    Raises:
        ConfigurationError: If validation fails
    """
    schema = load_schema(schema_name, config_dir)
    if not schema:
        return

    try:
        validate(instance=config, schema=schema)
        logger.debug("config_validation_succeeded", schema=schema_name)
    except JSONSchemaValidationError as e:
        error_msg = f"Config validation failed for {schema_name}"
        if file_path:
            error_msg += f" (file: {file_path})"
        error_msg += f": {e.message}"
        raise ConfigurationError(error_msg) from e


def _load_yaml_file(path: Path, schema_name: str, config_dir: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("config_file_load_failed", path=str(path), error=str(e))
        return {}

    if not isinstance(file_config, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    validate_config_section(file_config, schema_name, str(path), config_dir)
    logger.debug("config_file_loaded", path=str(path), schema=schema_name)
    return file_config


def load_all_configs(config_dir: Path = CONFIG_DIR) -> dict[str, Any]:
    """Load and merge all YAML configs from the config directory.

    Loading order (later overrides earlier):
    1. config/main.yaml
    2. All other config/*.yaml files (sorted alphabetically)

    Each file is validated against the JSON Schema named after it, if available.

    Returns:
        Merged configuration dictionary
    """
    merged_config: dict[str, Any] = {}
    file_count = 0

    main_path = config_dir / f"{MAIN_CONFIG_NAME}.yaml"
    if main_path.exists():
        merged_config = _load_yaml_file(main_path, MAIN_CONFIG_NAME, config_dir)
        file_count += 1

    if config_dir.is_dir():
        for yaml_file in sorted(config_dir.glob("*.yaml")):
            if yaml_file.name == main_path.name:
                continue
            file_config = _load_yaml_file(yaml_file, yaml_file.stem, config_dir)
            merged_config = deep_merge(merged_config, file_config)
            file_count += 1

    logger.debug("config_load_complete", file_count=file_count)
    return merged_config


class Settings(BaseSettings):
    """Application settings.

    Explicit arguments and environment variables win; YAML sections fill
    in whatever was not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    # Preprocessing modules
    bot_detector: BotDetectorConfig = Field(default_factory=BotDetectorConfig)
    slash_command: SlashCommandConfig = Field(default_factory=SlashCommandConfig)
    content_filter: ContentFilterConfig = Field(default_factory=ContentFilterConfig)

    # Scorers and aggregation
    readability: ReadabilityScorerConfig = Field(
        default_factory=ReadabilityScorerConfig
    )
    technical: TechnicalScorerConfig = Field(default_factory=TechnicalScorerConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    chain_name: str = Field(
        default="contribution-scoring", description="Name of the default chain"
    )

    def __init__(self, **data: Any):
        """Initialize settings with auto-loaded configs from all YAML files."""
        config = load_all_configs()

        super().__init__(**data)
        self._apply_yaml_defaults(config)

    def _apply_yaml_defaults(self, config: dict[str, Any]) -> None:
        """Apply YAML-sourced defaults without overriding env-provided values."""

        fields_from_env = set(self.model_fields_set)

        def _assign(field_name: str, value: Any) -> None:
            if value is None:
                return
            if field_name in fields_from_env:
                return

            object.__setattr__(self, field_name, value)
            self.model_fields_set.add(field_name)

        logging_config = config.get("logging") or {}
        _assign("log_level", logging_config.get("level"))
        _assign("json_logs", logging_config.get("json"))

        pipeline_config = config.get("pipeline") or {}
        _assign("chain_name", pipeline_config.get("chain_name"))

        for section, model in SECTION_MODELS.items():
            section_config = config.get(section)
            if section_config is None:
                continue
            try:
                _assign(section, model.model_validate(section_config))
            except PydanticValidationError as e:
                logger.error("config_section_invalid", section=section, error=str(e))
                raise ConfigurationError(
                    f"Invalid '{section}' configuration: {e}"
                ) from e


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
