"""Core errors surfaced to callers of the stats service."""

class InvalidInput(ValueError):
    """Post id missing or not a positive integer."""

    def __init__(self, message: str = "Invalid Post ID"):
        self.message = message
        super().__init__(self.message)

class StoreUnavailable(RuntimeError):
    """Backing store unreachable, schema missing, or write rejected."""

    def __init__(self, message: str = "View store unavailable"):
        self.message = message
        super().__init__(self.message)

class WriteConflict(StoreUnavailable):
    """A concurrent transaction modified the same view record first."""

    def __init__(self, message: str = "Concurrent write conflict"):
        super().__init__(message)


def validate_post_id(post_id) -> int:
    """Return post_id as int or raise InvalidInput."""
    if isinstance(post_id, bool) or not isinstance(post_id, int) or post_id <= 0:
        raise InvalidInput(f"Invalid Post ID: {post_id!r}")
    return post_id
