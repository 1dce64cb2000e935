"""
Repositories Package - Infrastructure Layer

Concrete repository implementations backed by document databases.
"""

from .item_repository import ItemRepository

__all__ = ["ItemRepository"]
