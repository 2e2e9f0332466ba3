"""
Configuration module - Centralized settings management.

Usage:
    from storefront_qa.config import get_settings, load_config
    
    # Get global settings (loaded once)
    settings = get_settings()
    
    # Or load fresh settings with overrides
    settings = load_config(browser={"headless": False})

Environment Variables:
    STOREFRONT_QA__BROWSER__BASE_URL=https://www.saucedemo.com
    STOREFRONT_QA__BROWSER__HEADLESS=false
    STOREFRONT_QA__LOCATORS__STRICT_PAIRS=true
"""

from storefront_qa.config.settings import (
    Settings,
    BrowserSettings,
    LocatorSettings,
    LoggingSettings,
)
from storefront_qa.config.loader import ConfigLoader, load_config

# Global settings singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).
    
    Settings are loaded once from environment variables and config files.
    Call reset_settings() to reload.
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (forces reload on next get_settings())."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "BrowserSettings",
    "LocatorSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]
