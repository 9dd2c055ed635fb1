"""Fuel Mixture Volume Service — converts a two-fuel mass mixture into ml volumes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py apart from __version__: explicit imports only, no star exports
"""

__version__ = "1.0.0"
