"""
Configuration package for the voucher service.

This package contains modules for managing application settings,
environment variables, and logging configuration.
"""

from vouchers.config.settings import Settings

# Export settings singleton for app-wide use
settings = Settings()

__all__ = ["settings", "Settings"]
