"""Repository implementations backed by SQLAlchemy."""
