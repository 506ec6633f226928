"""Core Layer - pure classification and transition logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell owns the single
      bulk write, the core decides what to write
"""
