"""ORM Models — SQLAlchemy tables backing the durable key-value store."""
