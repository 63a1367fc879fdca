"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the use cases that the HTTP layer binds to.

This layer contains:
- Use Cases: one per resource operation
- Services: patch application, upsert decisions
- Protocols: interfaces for the repository collaborator
- Pagination: page normalization and page-link computation
"""
