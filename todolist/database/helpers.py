class DatabaseError(Exception):
    """Custom exception for preference store operations."""
    pass
