"""Pydantic Schemas - request payloads, stored records and the config file shape.

Invariants:
    - Schemas validate at system boundaries (request bodies, stored documents, config file)
"""
