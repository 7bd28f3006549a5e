"""Domain layer for loyaltypoints application.

Services are imported from their modules directly; this package does not
re-export them because the persistence layer imports domain entities.
"""
