"""Configuration validation for ssmlsan.

This module provides Pydantic models for the service configuration file
(YAML), plus environment-variable overrides for scalar settings, so that
secrets such as ``TTS_API_KEY`` never have to live in the file.
"""

import os
import re
from pathlib import Path
from typing import Any, Mapping, get_origin

from pydantic import BaseModel, Field, field_validator, model_validator

from .consts import DEFAULT_PRESERVE_TAGS, RULE_NAME_PATTERN
from .exceptions import ConfigError
from .registry import PatternRule


class TagPattern(BaseModel):
    """A named preserve-tag pattern as written in the config file."""

    name: str
    pattern: str

    @field_validator("name", "pattern")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("cannot be empty")
        return v

    @field_validator("name")
    @classmethod
    def name_must_be_identifier(cls, v: str) -> str:
        if not re.fullmatch(RULE_NAME_PATTERN, v):
            raise ValueError(
                f"name '{v}' may only contain letters, digits, '_' and '-'"
            )
        return v

    def to_rule(self) -> PatternRule:
        return PatternRule(name=self.name, pattern=self.pattern)


class SSMLConfig(BaseModel):
    """Tags that must survive escaping unchanged."""

    preserve_tags: list[TagPattern] = Field(
        default_factory=lambda: [TagPattern(**t) for t in DEFAULT_PRESERVE_TAGS]
    )

    @field_validator("preserve_tags", mode="before")
    @classmethod
    def parse_preserve_tags(cls, v: Any) -> list[Any]:
        if v is None:
            return []
        if not isinstance(v, list):
            raise ValueError(f"preserve_tags must be a list, got {type(v).__name__}")
        return v

    @field_validator("preserve_tags")
    @classmethod
    def names_must_be_unique(cls, v: list[TagPattern]) -> list[TagPattern]:
        seen = set()
        for tag in v:
            if tag.name in seen:
                raise ValueError(f"Duplicate preserve tag name '{tag.name}'")
            seen.add(tag.name)
        return v

    def rules(self) -> list[PatternRule]:
        return [tag.to_rule() for tag in self.preserve_tags]


class ServerConfig(BaseModel):
    """HTTP server settings."""

    port: int = 8080
    read_timeout: int = 30
    write_timeout: int = 30
    base_path: str = ""

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {v}")
        return v

    @field_validator("read_timeout", "write_timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"timeout must be positive, got {v}")
        return v


class TTSConfig(BaseModel):
    """Speech-synthesis provider settings."""

    api_key: str = ""
    region: str = "eastasia"
    default_voice: str = "zh-CN-XiaoxiaoNeural"
    default_rate: str = "0"
    default_pitch: str = "0"
    default_format: str = "audio-24khz-48kbitrate-mono-mp3"
    max_text_length: int = 65535
    request_timeout: int = 30
    max_concurrent: int = 20
    segment_threshold: int = 300
    min_sentence_length: int = 200
    max_sentence_length: int = 300
    voice_mapping: dict[str, str] = Field(default_factory=dict)

    @field_validator(
        "max_text_length",
        "request_timeout",
        "max_concurrent",
        "segment_threshold",
        "min_sentence_length",
        "max_sentence_length",
    )
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be positive, got {v}")
        return v

    @field_validator("voice_mapping", mode="before")
    @classmethod
    def parse_voice_mapping(cls, v: Any) -> dict[str, str]:
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def validate_sentence_lengths(self) -> "TTSConfig":
        if self.min_sentence_length > self.max_sentence_length:
            raise ValueError(
                f"min_sentence_length ({self.min_sentence_length}) exceeds "
                f"max_sentence_length ({self.max_sentence_length})"
            )
        return self


class OpenAIConfig(BaseModel):
    """OpenAI-compatible API settings."""

    api_key: str = ""


class AppConfig(BaseModel):
    """Main configuration model."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    tts: TTSConfig = Field(default_factory=TTSConfig)
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    ssml: SSMLConfig = Field(default_factory=SSMLConfig)


def _apply_env_overrides(
    data: dict[str, Any], environ: Mapping[str, str]
) -> dict[str, Any]:
    """Overlay ``<SECTION>_<FIELD>`` environment variables onto ``data``.

    Only scalar fields are overridable; lists and mappings such as
    ``preserve_tags`` or ``voice_mapping`` come from the file alone.
    """
    for section, section_field in AppConfig.model_fields.items():
        section_model = section_field.annotation
        for name, info in section_model.model_fields.items():
            if get_origin(info.annotation) is not None:
                continue
            key = f"{section}_{name}".upper()
            if key in environ:
                section_data = data.get(section)
                if not isinstance(section_data, dict):
                    section_data = {}
                    data[section] = section_data
                section_data[name] = environ[key]
    return data


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate configuration from a YAML file and the environment.

    Every call builds a fresh AppConfig; callers load once at startup and
    pass the result around.

    Args:
        path: Path to the YAML configuration file, or None for defaults
        environ: Environment mapping used for overrides (default os.environ)

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If the file cannot be read or validation fails
    """
    from yaml import safe_load, YAMLError

    if environ is None:
        environ = os.environ

    data: Any = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                data = safe_load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}")
        except YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}"
            )

    data = _apply_env_overrides(data, environ)

    try:
        return AppConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path or 'environment'}: {e}") from e
