"""Application settings loaded from environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Report builder configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with
    INSPECTION_REPORT_. For example: INSPECTION_REPORT_COMPANY_PHONE=5551234567
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="INSPECTION_REPORT_",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Branding (header contact block and legal sections) =====
    company_name: str = "AGI: PROPERTY INSPECTIONS"
    company_legal_name: str = "AGI Property Inspections"
    company_phone: str = "3379051428"
    company_phone_display: str = "337-905-1428"
    company_email: str = "info@agi-swla.com"
    company_website: str = "https://www.agi-swla.com"
    jurisdiction: str = "Louisiana"

    # ===== Assets =====
    default_logo_path: str = "/AGI_Logo.png"
    asset_root: Path = Field(default_factory=Path.cwd)

    # ===== Footer =====
    footer_text: str = "Generated by Advanced Image Editor"

    # ===== Logging =====
    log_level: str = "INFO"
    log_json: bool = True


# Global settings instance
settings = Settings()
