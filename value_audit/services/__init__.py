"""Services Layer - imperative shell around the pure core.

Invariants:
    - Services orchestrate core functions and the single audit write
    - No business rule lives here that is not delegated to core/
"""
