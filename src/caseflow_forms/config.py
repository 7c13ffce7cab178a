"""
Configuration management for the verification-form engine.
Supports .env files and environment variables (prefixed with CASEFLOW_).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CASEFLOW_",
        extra="ignore",
    )

    # Fallbacks for unknown verification / form types
    default_verification_type: str = "RESIDENCE"
    default_table_name: str = "residenceVerificationReports"
    default_form_type: str = "POSITIVE"

    # Section rendering
    not_provided_text: str = "Not provided"
    expanded_section_count: int = 2

    # Diagnostics
    warn_on_missing_relevant_columns: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
