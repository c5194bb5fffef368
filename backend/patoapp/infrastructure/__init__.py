"""Infrastructure Layer — database session manager, key-value stores, logging.

Invariants:
    - Only infrastructure/ talks to SQLAlchemy engines directly
    - Store implementations satisfy core.repository_protocols.KeyValueStore
"""
