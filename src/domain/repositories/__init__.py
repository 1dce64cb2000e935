"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .item_repository import IItemRepository

__all__ = ["IItemRepository"]
