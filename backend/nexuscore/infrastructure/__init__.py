"""Infrastructure Layer: MongoDB access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
"""
