"""
Database package - Infrastructure Layer

Document stores the repositories run on: MongoDB for deployments and an
in-memory store for test hosts.
"""

from src.infrastructure.database.document_database import DocumentDatabase
from src.infrastructure.database.memory_database import InMemoryDatabase
from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["DocumentDatabase", "InMemoryDatabase", "MongoDatabase"]
