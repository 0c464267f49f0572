"""Core Layer - pure domain logic: errors, identity types, merge policy, protocols.

Invariants:
    - Core never imports from api/ or infrastructure/
    - No IO in core functions
"""
