"""Settings module for the parameter framework criteria."""

from .settings import CriterionSettings, get_settings, reset_settings

__all__ = ["CriterionSettings", "get_settings", "reset_settings"]
