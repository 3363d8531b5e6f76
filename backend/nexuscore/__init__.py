"""Nexuscore Application Package: video catalogue API over MongoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
