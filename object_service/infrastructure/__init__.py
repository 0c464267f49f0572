"""Infrastructure Layer - document store client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All driver exceptions are mapped to core errors before leaving this layer
"""
