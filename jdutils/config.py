# -*- coding: utf-8 -*-
# config.py — Centralized application configuration manager

import os
from typing import List, Optional
from dataclasses import dataclass, field


def _env_str(name: str) -> Optional[str]:
    """Read an env var, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class Config:
    """Application configuration settings"""

    # Google Sheets destination
    SPREADSHEET_ID: Optional[str] = field(default_factory=lambda: _env_str("GOOGLE_SHEETS_SPREADSHEET_ID"))
    TAB_NAME: str = field(default_factory=lambda: _env_str("GOOGLE_SHEETS_TAB_NAME") or "External")

    # Service account credentials
    SERVICE_ACCOUNT_EMAIL: Optional[str] = field(default_factory=lambda: _env_str("GOOGLE_SERVICE_ACCOUNT_EMAIL"))
    PRIVATE_KEY: Optional[str] = field(default_factory=lambda: _env_str("GOOGLE_PRIVATE_KEY"))
    TOKEN_URI: str = field(
        default_factory=lambda: os.getenv("GOOGLE_TOKEN_URI", "https://oauth2.googleapis.com/token")
    )
    SCOPES: List[str] = None

    # Logging configuration
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    LOG_FORMAT: str = field(
        default_factory=lambda: os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    # Performance monitoring
    MAX_SUBMIT_TIME: float = field(default_factory=lambda: float(os.getenv("MAX_SUBMIT_TIME", "5.0")))
    ENABLE_PERFORMANCE_MONITORING: bool = field(
        default_factory=lambda: os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )

    # HTTP server
    API_HOST: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    API_PORT: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))

    def __post_init__(self):
        """Post-initialization: populate defaults"""
        if self.SCOPES is None:
            self.SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    @classmethod
    def from_env(cls) -> "Config":
        """Build a fresh configuration from the current process environment."""
        return cls()

    def missing_sheets_settings(self) -> List[str]:
        """Names of the env vars a sheet append still needs."""
        missing = []
        if not self.SPREADSHEET_ID:
            missing.append("GOOGLE_SHEETS_SPREADSHEET_ID")
        if not self.SERVICE_ACCOUNT_EMAIL:
            missing.append("GOOGLE_SERVICE_ACCOUNT_EMAIL")
        if not self.PRIVATE_KEY:
            missing.append("GOOGLE_PRIVATE_KEY")
        return missing

    @property
    def sheets_configured(self) -> bool:
        return not self.missing_sheets_settings()


# Global configuration instance (imported throughout the application)
config = Config()
