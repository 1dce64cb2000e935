"""
Main module - Main/Composition Root Layer

This module orchestrates the initialization and configuration of all
other layers.

Its primary responsibilities include:
- Loading settings
- Configuring dependencies and services (Composition Root)
- Initializing the framework (FastAPI)
"""

from .config import AppSettings, get_settings, load_settings
from .container import AppContainer, app_lifespan, build_container

__all__ = [
    "AppSettings",
    "get_settings",
    "load_settings",
    "AppContainer",
    "build_container",
    "app_lifespan",
]
