"""
Database package - Infrastructure Layer

MongoDB connection handling for stations and demand records.
"""

from gridcast.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
