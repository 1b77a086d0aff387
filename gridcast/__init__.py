"""
GridCast - hourly electricity demand forecasting per grid station.

Layer Structure:
- Domain: entities, repository interfaces, ports and pure services
- Application: use cases and DTOs
- Infrastructure: MongoDB storage, exogenous inputs, health checks
- Presentation: FastAPI routers
- Shared: cross-cutting constants and logging
- Main: configuration, dependency container and entry point
"""
