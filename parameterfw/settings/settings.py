"""
Pydantic settings for selection criteria.

This module provides the configuration shared by every criterion:
- Placeholder rendered for an unset or unnamed state
- Delimiter used to join inclusive flag literals
- Whether state changes are logged
- Singleton pattern for consistent access
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CriterionSettings(BaseSettings):
    """
    Criterion settings loaded from environment variables.

    Every field can be overridden with a ``PFW_CRITERION_`` prefixed
    variable, e.g. ``PFW_CRITERION_INCLUSIVE_DELIMITER=","``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PFW_CRITERION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not in schema
    )

    # ==========================================
    # Formatting
    # ==========================================
    none_literal: str = "<none>"
    inclusive_delimiter: str = "|"

    # ==========================================
    # Logging
    # ==========================================
    log_state_changes: bool = True

    # ==========================================
    # Validators
    # ==========================================
    @field_validator("none_literal")
    @classmethod
    def validate_none_literal(cls, v: str) -> str:
        """The placeholder must be visible in formatted output."""
        if not v.strip():
            raise ValueError("none_literal must not be blank")
        return v

    @field_validator("inclusive_delimiter")
    @classmethod
    def validate_inclusive_delimiter(cls, v: str) -> str:
        """Delimiter is used to split literals back apart, so it can't be blank."""
        if not v.strip():
            raise ValueError("inclusive_delimiter must not be blank")
        return v


# ==========================================
# Singleton Access
# ==========================================
_settings: CriterionSettings | None = None


def get_settings() -> CriterionSettings:
    """
    Get the singleton CriterionSettings instance.

    Returns:
        CriterionSettings: The criterion settings

    Raises:
        ValidationError: If an environment override is invalid
    """
    global _settings
    if _settings is None:
        _settings = CriterionSettings()
    return _settings


def reset_settings() -> None:
    """
    Reset the settings singleton (for testing purposes).
    """
    global _settings
    _settings = None
