"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as databases and
dependency probes.
"""

from src.infrastructure import database, repositories, services

__all__ = ["database", "repositories", "services"]
