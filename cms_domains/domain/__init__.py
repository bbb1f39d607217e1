"""
Domain layer - entities, events and transaction boundaries.

This layer contains:
- Domain entity and domain exceptions
- Save/delete event args, listener interface and notifier
- Operation outcome (success / cancelled)
- Unit of Work abstractions
"""
