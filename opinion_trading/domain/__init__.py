"""Domain Layer - Pure Business Logic.

This layer contains:
- Bounded Contexts (Users, Events, Trading, Notifications)
- Aggregate Roots (User, Event, Trade)
- Value Objects (immutable domain primitives)
- Domain Services (calculate_payout)
- Domain Events (for decoupling)
- Repository Interfaces (ports)

Key Principles:
- Zero dependencies on infrastructure
- Pure business logic only
- Rich domain models (not anemic)
- Ubiquitous language

Bounded Contexts:
- users: Accounts, credentials, balances
- events: Event lifecycle, outcome options, external feed port
- trading: Trade lifecycle, settlement payouts
- notifications: Real-time notifier port
- shared: Common base classes
"""

# Shared kernel
from .shared import AggregateRoot, BusinessRuleViolation, DomainEvent, DomainException

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "DomainException",
    "BusinessRuleViolation",
]
