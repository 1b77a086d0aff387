"""
Infrastructure Layer Package

Concrete adapters for the domain ports and repositories: MongoDB
storage, synthetic exogenous inputs and dependency health checks.
"""
