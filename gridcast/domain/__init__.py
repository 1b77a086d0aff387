"""
Domain Layer Package

Entities, repository interfaces, ports and pure services of the demand
forecasting domain. No web framework or database code lives here.
"""

from gridcast.domain import entities, ports, repositories, services

__all__ = ["entities", "ports", "repositories", "services"]
