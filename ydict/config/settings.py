"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import TextConstants, YoudaoConstants


class YoudaoSettings(BaseSettings):
    """Youdao endpoints and request options"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    dict_url: str = Field(
        default=YoudaoConstants.DICT_URL,
        validation_alias=AliasChoices("YDICT_DICT_URL"),
    )
    suggest_url: str = Field(
        default=YoudaoConstants.SUGGEST_URL,
        validation_alias=AliasChoices("YDICT_SUGGEST_URL"),
    )
    request_timeout: int = Field(
        default=10, validation_alias=AliasChoices("YDICT_REQUEST_TIMEOUT")
    )
    user_agent: str = Field(
        default=YoudaoConstants.DEFAULT_USER_AGENT,
        validation_alias=AliasChoices("YDICT_USER_AGENT"),
    )
    suggest_limit: int = Field(
        default=5, validation_alias=AliasChoices("YDICT_SUGGEST_LIMIT")
    )

    @field_validator("dict_url", "suggest_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URL format"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout", "suggest_limit")
    @classmethod
    def validate_positive_integers(cls, v: int) -> int:
        """Validate positive integer values"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class RenderSettings(BaseSettings):
    """Presentation options for rendered text"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    phonetic_height: float = Field(
        default=0.9, validation_alias=AliasChoices("YDICT_PHONETIC_HEIGHT")
    )
    exam_height: float = Field(
        default=0.8, validation_alias=AliasChoices("YDICT_EXAM_HEIGHT")
    )
    word_forms_width: int = Field(
        default=60, validation_alias=AliasChoices("YDICT_WORD_FORMS_WIDTH")
    )
    entry_spacing: float = Field(
        default=1.4, validation_alias=AliasChoices("YDICT_ENTRY_SPACING")
    )
    explain_spacing: float = Field(
        default=1.2, validation_alias=AliasChoices("YDICT_EXPLAIN_SPACING")
    )
    pos_tokens: list[str] = Field(
        default_factory=lambda: list(TextConstants.PART_OF_SPEECH_TOKENS),
        validation_alias=AliasChoices("YDICT_POS_TOKENS"),
    )

    @field_validator("phonetic_height", "exam_height", "entry_spacing", "explain_spacing")
    @classmethod
    def validate_positive_floats(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("word_forms_width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Width must be positive")
        return v

    @field_validator("pos_tokens")
    @classmethod
    def validate_tokens(cls, v: list[str]) -> list[str]:
        """Drop blank tokens and duplicates, keep order"""
        return list(dict.fromkeys(t.strip() for t in v if t and t.strip()))


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    youdao: YoudaoSettings = Field(default_factory=YoudaoSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))


# Global settings instance
settings = AppSettings()
