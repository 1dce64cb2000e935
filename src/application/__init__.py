"""
Application Layer Package

This package contains the application-specific use cases, DTOs and
configuration models. It orchestrates the flow of data to and from the
domain entities.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
