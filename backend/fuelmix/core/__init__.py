"""Core Layer — pure mixture arithmetic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell: routes only translate
"""
