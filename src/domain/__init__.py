"""
Domain Layer Package

This package contains the core entities, errors and ports of the
application, without dependencies on frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, ports, repositories

__all__ = ["entities", "repositories", "ports"]
