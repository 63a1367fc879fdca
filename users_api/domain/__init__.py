"""
Domain layer.

The domain layer contains the user model and the rules that gate every
write to it. It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle (User)
- Value Objects: Immutable objects defined by attributes (UserId, GameId)
- Domain Services: Stateless validation rules over user input
"""
