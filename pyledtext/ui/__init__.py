"""Preview frontends for rendered LED text."""

from .app import AppConfig, LedMatrixApp

__all__ = ["AppConfig", "LedMatrixApp"]
