"""Infrastructure - SQL session management, audit repository, structured logging.

Invariants:
    - One DatabaseSessionManager (and engine) per process, owned by the host
    - All SQLAlchemy failures surface as PersistenceError
"""
