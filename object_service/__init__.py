"""Object Service - HTTP CRUD over a single MongoDB collection of objects.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
