"""
Application Layer Package

Use cases and DTOs. Orchestrates domain entities and services on
behalf of the presentation layer.
"""

from gridcast.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
