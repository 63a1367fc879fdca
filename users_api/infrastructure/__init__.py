"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer:

- Persistence (SQLAlchemy repository and ORM mapping)
- Web framework (FastAPI routers and wire schemas)
- Dependency injection glue

This layer depends on domain and application layers,
but they do not depend on it.
"""
