"""Core Layer: pure video-record logic, error types, and boundary protocols.

Invariants:
    - No IO and no imports from infrastructure/ or api/
"""
